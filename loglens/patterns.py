"""LogLens - Constants and patterns"""

import re
from typing import Optional

VERSION = "1.0.0"

# Line-format markers
BASE64_MARKER = 'BASE64:'
JSON_PREFIX = '{'
ERROR_KEYWORDS = ('Exception', 'Error')

# Detection patterns
BASE64_PATTERN = re.compile(
    r'^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})$'
)
TIMESTAMP_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}')
ERROR_TYPE_PATTERN = re.compile(r'[A-Za-z]+Exception|Error(?!:)')


def is_base64_encoded(text: str) -> bool:
    return BASE64_PATTERN.fullmatch(text) is not None


def find_timestamp(text: str) -> Optional[str]:
    match = TIMESTAMP_PATTERN.search(text)
    return match.group(0) if match else None


def find_error_type(text: str) -> Optional[str]:
    """First exception class name, or a bare 'Error' not followed by a colon"""
    match = ERROR_TYPE_PATTERN.search(text)
    return match.group(0) if match else None


def has_error_keyword(text: str) -> bool:
    return any(keyword in text for keyword in ERROR_KEYWORDS)

"""LogLens - Encoded payload decoder"""

import base64
import binascii
import json
from typing import Dict

from .errors import DecodeParseError, EncodingError
from .patterns import BASE64_MARKER, is_base64_encoded


def reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def strip_marker(line: str) -> str:
    return line.replace(BASE64_MARKER, '', 1).strip()


def decode_payload(line: str, line_number: int = 0) -> Dict:
    """Decode a 'BASE64:' line into the JSON object it carries.

    Raises EncodingError when the blob is not valid base64 and
    DecodeParseError when the decoded text is not a JSON object.
    """
    blob = strip_marker(line)
    if not is_base64_encoded(blob):
        raise EncodingError(f"Invalid base64 payload: {blob[:40]!r}", line_number)

    try:
        text = base64.b64decode(blob, validate=True).decode('utf-8')
        data = json.loads(text, parse_constant=reject_constant)
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise DecodeParseError(f"Failed to decode or parse base64 JSON: {e}", line_number) from e

    if not isinstance(data, dict):
        raise DecodeParseError(
            f"Decoded payload is a {type(data).__name__}, not an object", line_number
        )
    return data

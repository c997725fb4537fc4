"""LogLens - Core analysis engine"""

import json
import logging
from pathlib import Path
from typing import List

from rich.progress import Progress, SpinnerColumn, TextColumn

from .aggregator import aggregate
from .decoder import decode_payload, reject_constant
from .errors import (
    DecodeParseError,
    EncodingError,
    MissingTokenError,
    ParseFailure,
    StructuredParseError,
)
from .extractor import build_error_record, build_event_record
from .models import ErrorRecord, EventRecord, ParseResult
from .patterns import BASE64_MARKER, JSON_PREFIX, has_error_keyword

logger = logging.getLogger(__name__)


def parse_json_line(line: str, line_number: int = 0) -> dict:
    try:
        data = json.loads(line, parse_constant=reject_constant)
    except ValueError as e:
        raise StructuredParseError(f"Failed to parse JSON line: {e}", line_number) from e
    if not isinstance(data, dict):
        raise StructuredParseError(
            f"JSON line is a {type(data).__name__}, not an object", line_number
        )
    return data


def classify_line(line: str, errors: List[ErrorRecord], events: List[EventRecord],
                  line_number: int = 0) -> None:
    """Route one line into the error and/or event collections.

    The three checks are independent, so a single line may produce both an
    event and an error record.
    """
    if line.startswith(BASE64_MARKER):
        try:
            events.append(build_event_record(decode_payload(line, line_number)))
        except EncodingError as e:
            logger.debug("Line %d skipped: %s", line_number, e)
        except DecodeParseError as e:
            logger.warning("Line %d skipped: %s", line_number, e)

    if has_error_keyword(line):
        try:
            errors.append(build_error_record(line, line_number))
        except MissingTokenError as e:
            logger.debug("Line %d skipped: %s", line_number, e)

    if line.startswith(JSON_PREFIX):
        try:
            events.append(build_event_record(parse_json_line(line, line_number)))
        except StructuredParseError as e:
            logger.warning("Line %d skipped: %s", line_number, e)


def split_lines(content: str) -> List[str]:
    if not isinstance(content, str):
        raise ParseFailure(f"Expected text content, got {type(content).__name__}")
    return content.split('\n')


def parse_log(content: str) -> ParseResult:
    """Parse raw log text into records, a summary and aggregate counts"""
    lines = split_lines(content)
    errors: List[ErrorRecord] = []
    events: List[EventRecord] = []

    for i, line in enumerate(lines, 1):
        classify_line(line, errors, events, i)

    return aggregate(len(lines), errors, events)


class LogAnalyzer:
    """Parses log files, optionally showing progress on a rich console"""

    def __init__(self, console=None):
        self.console = console

    def analyze(self, content: str) -> ParseResult:
        if self.console is None:
            result = parse_log(content)
        else:
            result = self._analyze_with_progress(content)

        logger.info(
            "Parsed %d lines. Found %d errors, %d JSON logs.",
            result.summary.total_lines,
            result.summary.error_count,
            result.summary.event_count,
        )
        return result

    def _analyze_with_progress(self, content: str) -> ParseResult:
        lines = split_lines(content)
        errors: List[ErrorRecord] = []
        events: List[EventRecord] = []

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task("Analyzing logs...", total=len(lines))
            for i, line in enumerate(lines, 1):
                classify_line(line, errors, events, i)
                progress.update(task, advance=1)

        return aggregate(len(lines), errors, events)

    def analyze_file(self, filepath: str, encoding: str = 'utf-8') -> ParseResult:
        path = Path(filepath)
        if not path.is_file():
            raise ParseFailure(f"Log file not found: {filepath}")

        try:
            with open(path, 'r', encoding=encoding, errors='replace', newline='') as f:
                content = f.read()
        except (OSError, LookupError) as e:
            raise ParseFailure(f"Error reading file: {e}") from e

        return self.analyze(content)

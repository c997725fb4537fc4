"""LogLens - Aggregate statistics"""

from collections import Counter
from typing import Dict, Iterable, Sequence

from .models import ErrorRecord, EventRecord, ParseResult, ParseSummary


def count_errors_by_date(errors: Iterable[ErrorRecord]) -> Dict[str, int]:
    counts = Counter()
    for error in errors:
        date, sep, _ = error.timestamp.partition('T')
        if sep:
            counts[date] += 1
    return dict(counts)


def count_events_by_type(events: Iterable[EventRecord]) -> Dict[str, int]:
    counts = Counter()
    for event in events:
        if event.event is None or event.event == '':
            continue
        counts[str(event.event)] += 1
    return dict(counts)


def summarize(total_lines: int, errors: Sequence[ErrorRecord],
              events: Sequence[EventRecord]) -> ParseSummary:
    return ParseSummary(
        total_lines=total_lines,
        error_count=len(errors),
        event_count=len(events),
    )


def aggregate(total_lines: int, errors: Sequence[ErrorRecord],
              events: Sequence[EventRecord]) -> ParseResult:
    return ParseResult(
        errors=tuple(errors),
        events=tuple(events),
        summary=summarize(total_lines, errors, events),
        errors_by_date=count_errors_by_date(errors),
        events_by_type=count_events_by_type(events),
    )

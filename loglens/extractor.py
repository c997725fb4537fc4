"""LogLens - Field extraction"""

from typing import Dict

from .errors import MissingTokenError
from .models import ErrorRecord, EventRecord
from .patterns import find_error_type, find_timestamp


def build_event_record(data: Dict) -> EventRecord:
    details = data.get('details')
    if not isinstance(details, dict):
        details = {}

    item_id = details.get('item_id')
    if item_id is None:
        item_id = details.get('itemId')

    return EventRecord(
        timestamp=data.get('timestamp'),
        user=data.get('user'),
        event=data.get('event'),
        item_id=item_id,
        quantity=details.get('quantity'),
        price=details.get('price'),
        ip=data.get('ip'),
    )


def build_error_record(line: str, line_number: int = 0) -> ErrorRecord:
    """Build an ErrorRecord from a freeform error line.

    The details are the line with the first occurrence of the timestamp and
    then the first occurrence of the error type removed. If either token also
    appears earlier in the line, that earlier occurrence is the one removed.
    """
    timestamp = find_timestamp(line)
    error_type = find_error_type(line)
    if not timestamp or not error_type:
        raise MissingTokenError("Error line without timestamp or error type", line_number)

    details = line.replace(timestamp, '', 1).replace(error_type, '', 1).strip()
    return ErrorRecord(timestamp=timestamp, type=error_type, details=details)

"""LogLens - Data models"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ErrorRecord:
    """Freeform error line"""
    timestamp: str
    type: str
    details: str


@dataclass(frozen=True)
class EventRecord:
    """Structured application event"""
    timestamp: Optional[Any] = None
    user: Optional[Any] = None
    event: Optional[Any] = None
    item_id: Optional[Any] = None
    quantity: Optional[Any] = None
    price: Optional[Any] = None
    ip: Optional[Any] = None


@dataclass(frozen=True)
class ParseSummary:
    total_lines: int
    error_count: int
    event_count: int


@dataclass(frozen=True)
class ParseResult:
    """Everything produced by one parse pass"""
    errors: Tuple[ErrorRecord, ...]
    events: Tuple[EventRecord, ...]
    summary: ParseSummary
    errors_by_date: Dict[str, int] = field(default_factory=dict)
    events_by_type: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'summary': asdict(self.summary),
            'errors': [asdict(e) for e in self.errors],
            'events': [asdict(e) for e in self.events],
            'errors_by_date': dict(self.errors_by_date),
            'events_by_type': dict(self.events_by_type),
        }

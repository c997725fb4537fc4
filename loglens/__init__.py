"""LogLens package"""

from .patterns import VERSION
from .models import ErrorRecord, EventRecord, ParseResult, ParseSummary
from .errors import LogLensError, ParseFailure
from .analyzer import LogAnalyzer, parse_log
from .output import print_report

__all__ = [
    'VERSION',
    'ErrorRecord',
    'EventRecord',
    'LogAnalyzer',
    'LogLensError',
    'ParseFailure',
    'ParseResult',
    'ParseSummary',
    'parse_log',
    'print_report',
]

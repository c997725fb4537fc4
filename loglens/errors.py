"""LogLens - Exceptions"""


class LogLensError(Exception):
    """Base class for all LogLens errors"""


class LineError(LogLensError):
    """A single line could not be turned into a record.

    Raised inside the per-line pipeline and always handled by the line
    classifier; the line is dropped and parsing continues.
    """

    def __init__(self, message: str, line_number: int = 0):
        super().__init__(message)
        self.line_number = line_number


class EncodingError(LineError):
    """Encoded payload failed the base64 charset/padding check"""


class DecodeParseError(LineError):
    """Decoded payload is not a JSON object"""


class StructuredParseError(LineError):
    """Inline '{' line is not a JSON object"""


class MissingTokenError(LineError):
    """Freeform error line lacks a timestamp or an error type"""


class ParseFailure(LogLensError):
    """The whole parse could not proceed"""

"""Errors raised by the portal reader.

Every failure of a fetch surfaces as a ``ReaderError`` whose ``kind`` tells
the caller which stage broke, so callers can branch without parsing messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    EXTRACTION = "extraction"
    DECODE = "decode"


class ReaderError(Exception):
    """Base class for failed fetches. ``cause`` is the original exception."""

    kind: ErrorKind

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class TransportError(ReaderError):
    """Network, TLS, timeout, HTTP status or redirect-limit failure."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, url: Optional[str], cause: Optional[BaseException] = None):
        super().__init__(f"Failed fetching data from the {url or 'remote'}.", cause)
        self.url = url


class ExtractionError(ReaderError):
    """Expected HTML structure was not found in the page."""

    kind = ErrorKind.EXTRACTION

    def __init__(self, step: str, cause: Optional[BaseException] = None):
        super().__init__(f"Failed extracting data from the response: {step}.", cause)
        self.step = step


class DecodeError(ReaderError):
    """The chart attribute did not hold a JSON object."""

    kind = ErrorKind.DECODE

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__("Failed decoding extracted data.", cause)


class ConfigError(ValueError):
    pass

"""Read electricity meter data from the e-st.lv customer portal."""

from .exceptions import ConfigError, DecodeError, ErrorKind, ExtractionError, ReaderError, TransportError
from .models import ClientConfig, FetchResult, Granularity, Period, QuerySpec, Reading, ReadingSeries
from .scraper import PortalClient

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "ErrorKind",
    "ExtractionError",
    "FetchResult",
    "Granularity",
    "Period",
    "PortalClient",
    "QuerySpec",
    "Reading",
    "ReadingSeries",
    "ReaderError",
    "TransportError",
]

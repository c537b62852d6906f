"""Data models for the e-st.lv reader."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, TypedDict, Union

from .exceptions import ConfigError


class Period(str, Enum):
    """Top-level query window."""

    DAY = "D"
    MONTH = "M"
    YEAR = "Y"


class Granularity(str, Enum):
    """Resolution of the data points inside the window."""

    NATIVE = "NATIVE"
    HOUR = "H"
    DAY = "D"


class Reading(TypedDict):
    timestamp: str
    value: Any


ReadingSeries = List[Reading]


class FetchResult(TypedDict):
    consumed: ReadingSeries
    returned: ReadingSeries


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and meter id for one portal account."""

    login: str
    password: str = field(repr=False)
    meter_id: str

    def __post_init__(self):
        object.__setattr__(self, "meter_id", str(self.meter_id))

    @classmethod
    def from_env(cls) -> "ClientConfig":
        login = os.getenv("EST_LOGIN")
        password = os.getenv("EST_PASSWORD")
        meter_id = os.getenv("EST_METER_ID")
        if not login or not password or not meter_id:
            raise ConfigError("Set EST_LOGIN, EST_PASSWORD and EST_METER_ID")
        return cls(login=login, password=password, meter_id=meter_id)


@dataclass(frozen=True)
class QuerySpec:
    """What to ask the data page for.

    Date parts left as ``None`` fall back to yesterday when the URL is built,
    and a missing granularity falls back to hourly. Fields that do not apply
    to the chosen period are ignored.
    """

    period: Union[Period, str] = Period.DAY
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    granularity: Optional[Union[Granularity, str]] = None

    def __post_init__(self):
        object.__setattr__(self, "period", Period(self.period))
        if self.granularity is not None:
            object.__setattr__(self, "granularity", Granularity(self.granularity))

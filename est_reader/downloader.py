import logging
from datetime import date, timedelta
from typing import Dict, Optional, Tuple
from urllib.parse import urlencode

import requests
from bs4 import BeautifulSoup

from .const import DATA_URL, REQUEST_TIMEOUT
from .exceptions import TransportError
from .models import Granularity, Period, QuerySpec

logger = logging.getLogger("est-reader.downloader")


Page = Tuple[BeautifulSoup, str]


def _yesterday(today: Optional[date] = None) -> date:
    return (today or date.today()) - timedelta(days=1)


def build_query_params(meter_id: str, query: QuerySpec, today: Optional[date] = None) -> Dict[str, str]:
    """Turn a query into data page parameters, in the order the portal sends them."""

    fallback = _yesterday(today)
    year = query.year if query.year is not None else fallback.year
    month = query.month if query.month is not None else fallback.month
    day = query.day if query.day is not None else fallback.day
    granularity = (query.granularity or Granularity.HOUR).value

    params = {
        "counterNumber": str(meter_id),
        "period": query.period.value,
    }

    if query.period is Period.YEAR:
        params["year"] = str(year)
    elif query.period is Period.MONTH:
        params["year"] = str(year)
        params["month"] = f"{month:02d}"
        params["granularity"] = granularity
    elif query.period is Period.DAY:
        params["date"] = f"{day:02d}.{month:02d}.{year}"
        params["granularity"] = granularity

    return params


def build_data_url(meter_id: str, query: QuerySpec, today: Optional[date] = None) -> str:
    return f"{DATA_URL}?{urlencode(build_query_params(meter_id, query, today))}"


def _send(session: requests.Session, method: str, url: str, data: Optional[Dict[str, str]] = None) -> Page:
    logger.info("%s %s", method, url)
    try:
        response = session.request(
            method,
            url,
            data=data,
            timeout=REQUEST_TIMEOUT,
            allow_redirects=True,
            verify=True,
        )
        logger.debug("%s %s -> status %s, final url %s", method, url, response.status_code, response.url)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("%s %s failed: %s", method, url, exc)
        raise TransportError(url, exc) from exc

    html = response.text
    logger.debug("%s %s returned %s characters", method, url, len(html))
    return BeautifulSoup(html, "html.parser"), html


def fetch_html(session: requests.Session, url: str) -> Page:
    return _send(session, "GET", url)


def post_form(session: requests.Session, url: str, data: Dict[str, str]) -> Page:
    return _send(session, "POST", url, data=data)

import json
import logging
from typing import Any, Dict, List

from bs4 import BeautifulSoup

from .const import CHART_ATTRIBUTE, CHART_SELECTOR, DIRECTIONS, LOGIN_FORM_SELECTOR
from .exceptions import DecodeError, ExtractionError
from .models import FetchResult, Reading

logger = logging.getLogger("est-reader.parser")


def is_login_page(soup: BeautifulSoup) -> bool:
    return soup.select_one(LOGIN_FORM_SELECTOR) is not None


def extract_chart_payload(soup: BeautifulSoup) -> Dict[str, Any]:
    """Decode the JSON document the portal embeds in the chart container."""

    chart = soup.select_one(CHART_SELECTOR)
    if chart is None:
        logger.error("Could not find %s on data page", CHART_SELECTOR)
        raise ExtractionError("chart element not found")

    raw = chart.get(CHART_ATTRIBUTE)
    if raw is None:
        logger.error("Chart element has no %s attribute", CHART_ATTRIBUTE)
        raise ExtractionError(f"chart attribute {CHART_ATTRIBUTE!r} not found")
    if not raw.strip():
        logger.error("Chart element has an empty %s attribute", CHART_ATTRIBUTE)
        raise ExtractionError(f"chart attribute {CHART_ATTRIBUTE!r} is empty")

    try:
        payload = json.loads(raw)
    except ValueError as exc:
        logger.error("Chart data is not valid JSON: %s", exc)
        raise DecodeError(exc) from exc

    if not isinstance(payload, dict):
        logger.error("Chart data decoded to %s, expected an object", type(payload).__name__)
        raise DecodeError(TypeError(f"expected a JSON object, got {type(payload).__name__}"))

    return payload


def _dig(node: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _series(payload: Dict[str, Any], code: str) -> List[Reading]:
    records = _dig(payload, "values", code, "total", "data")
    if not isinstance(records, list):
        return []

    series = []
    for record in records:
        if not isinstance(record, dict):
            logger.error("%s reading is %s, expected an object", code, type(record).__name__)
            raise DecodeError(TypeError(f"{code} reading is {type(record).__name__}, expected an object"))
        series.append({"timestamp": record.get("timestamp"), "value": record.get("value")})
    return series


def normalize_payload(payload: Dict[str, Any]) -> FetchResult:
    """Reshape the decoded chart document into consumed/returned series.

    Missing direction codes, and data that is absent or not a list, yield
    empty series. A reading that is not an object is a ``DecodeError``.
    Records keep upstream order and only their timestamp and value.
    """

    result = {direction: _series(payload, code) for code, direction in DIRECTIONS.items()}
    logger.info(
        "Parsed %s consumed and %s returned readings",
        len(result["consumed"]),
        len(result["returned"]),
    )
    return result

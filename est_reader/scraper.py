import json
import logging
from typing import Any, Mapping, Optional, Union

from .downloader import build_data_url, fetch_html
from .login import authenticate, create_session
from .models import ClientConfig, FetchResult, Granularity, Period, QuerySpec
from .parser import extract_chart_payload, is_login_page, normalize_payload

logger = logging.getLogger("est-reader.scraper")


class PortalClient:
    """Reads meter data from the e-st.lv customer portal.

    The client keeps one ``requests`` session, so cookies from a login are
    reused by later fetches. An instance is not safe for concurrent use;
    give each worker its own client or serialize the calls.
    """

    def __init__(
        self,
        config: Union[ClientConfig, str],
        password: Optional[str] = None,
        meter_id: Optional[Union[str, int]] = None,
    ):
        if not isinstance(config, ClientConfig):
            if password is None or meter_id is None:
                raise TypeError("password and meter_id are required when config is a login string")
            config = ClientConfig(login=config, password=password, meter_id=meter_id)
        self._config = config
        self._session = create_session()

    @property
    def meter_id(self) -> str:
        return self._config.meter_id

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PortalClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_day(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> FetchResult:
        """Hourly readings for one day, yesterday by default."""
        return self._fetch(
            QuerySpec(period=Period.DAY, year=year, month=month, day=day, granularity=Granularity.HOUR)
        )

    def fetch_month(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        granularity: Union[Granularity, str] = Granularity.DAY,
    ) -> FetchResult:
        return self._fetch(QuerySpec(period=Period.MONTH, year=year, month=month, granularity=granularity))

    def fetch_year(self, year: Optional[int] = None) -> FetchResult:
        return self._fetch(QuerySpec(period=Period.YEAR, year=year))

    def fetch_custom(self, query: Union[QuerySpec, Mapping[str, Any]]) -> FetchResult:
        """Fetch with an explicit query; a mapping takes the ``QuerySpec`` field names."""
        if not isinstance(query, QuerySpec):
            query = QuerySpec(**query)
        return self._fetch(query)

    def _fetch(self, query: QuerySpec) -> FetchResult:
        url = build_data_url(self._config.meter_id, query)
        logger.info("Fetching %s data for meter %s", query.period.name.lower(), self._config.meter_id)

        soup, html = fetch_html(self._session, url)
        if is_login_page(soup):
            soup, html = authenticate(self._session, soup, self._config)

        logger.debug("Extracting chart data from page (len=%s)", len(html))
        return normalize_payload(extract_chart_payload(soup))


if __name__ == "__main__":
    import os

    from .config import configure_logging

    configure_logging(os.getenv("EST_LOG_LEVEL", "DEBUG"))
    with PortalClient(ClientConfig.from_env()) as client:
        data = client.fetch_day()
    print(json.dumps(data, ensure_ascii=False, indent=2))

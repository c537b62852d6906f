import logging
from typing import Dict

import requests
from bs4 import BeautifulSoup

from .const import HEADERS, LOGIN_FIELD, LOGIN_URL, MAX_REDIRECTS, PASSWORD_FIELD, RETURN_URL_FIELD, TOKEN_FIELD
from .downloader import Page, post_form
from .exceptions import ExtractionError
from .models import ClientConfig
from .parser import is_login_page

logger = logging.getLogger("est-reader.login")


def create_session() -> requests.Session:
    """Return a session carrying the portal headers and the redirect limit."""

    session = requests.Session()
    session.headers.update(HEADERS)
    session.max_redirects = MAX_REDIRECTS
    session.verify = True
    return session


def _extract_hidden_value(soup: BeautifulSoup, name: str) -> str:
    field = soup.find("input", {"name": name})
    if field is None or not field.has_attr("value"):
        logger.error("Login form has no %s field", name)
        raise ExtractionError(f"login form field {name!r} not found")
    return field["value"]


def extract_login_fields(soup: BeautifulSoup) -> Dict[str, str]:
    """Read the anti-forgery token and return url from the login form."""

    fields = {name: _extract_hidden_value(soup, name) for name in (TOKEN_FIELD, RETURN_URL_FIELD)}
    logger.debug("Got login token, length=%s, returnUrl=%s", len(fields[TOKEN_FIELD]), fields[RETURN_URL_FIELD])
    return fields


def build_login_payload(fields: Dict[str, str], config: ClientConfig) -> Dict[str, str]:
    return {
        TOKEN_FIELD: fields[TOKEN_FIELD],
        RETURN_URL_FIELD: fields[RETURN_URL_FIELD],
        LOGIN_FIELD: config.login,
        PASSWORD_FIELD: config.password,
    }


def authenticate(session: requests.Session, login_page: BeautifulSoup, config: ClientConfig) -> Page:
    """Submit the login form found on ``login_page`` and return the page the portal answers with.

    The portal redirects back to the requested data page after a successful
    login. Rejected credentials are not detected here; the returned page then
    lacks the chart and extraction fails.
    """

    logger.info("Login form detected, authenticating for meter %s", config.meter_id)
    payload = build_login_payload(extract_login_fields(login_page), config)
    soup, html = post_form(session, LOGIN_URL, payload)

    logger.debug("Cookies after login: keys=%s", list(session.cookies.keys()))
    if is_login_page(soup):
        logger.warning("Portal answered the login with the login form again, check credentials")
    return soup, html

import logging
from unittest.mock import MagicMock

import pytest
from bs4 import BeautifulSoup

from est_reader.const import BASE_URL, LOGIN_URL
from est_reader.exceptions import ExtractionError
from est_reader.login import authenticate, build_login_payload, create_session, extract_login_fields


def soup_of(html):
    return BeautifulSoup(html, "html.parser")


def test_session_carries_portal_headers():
    session = create_session()
    try:
        assert session.headers["Referer"] == BASE_URL
        assert session.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert session.headers["User-Agent"].startswith("Mozilla/5.0")
        assert session.max_redirects == 3
        assert session.verify is True
    finally:
        session.close()


def test_sessions_are_independent():
    first, second = create_session(), create_session()
    try:
        first.cookies.set("laravel_session", "abc")
        assert "laravel_session" not in second.cookies
    finally:
        first.close()
        second.close()


def test_extract_login_fields(login_page):
    assert extract_login_fields(soup_of(login_page)) == {"_token": "T1", "returnUrl": "/x"}


@pytest.mark.parametrize(
    "form",
    [
        "<form class='authenticate'><input name='returnUrl' value='/x'></form>",
        "<form class='authenticate'><input name='_token' value='T1'></form>",
        "<form class='authenticate'><input name='_token'><input name='returnUrl' value='/x'></form>",
    ],
)
def test_missing_login_field_is_extraction_error(form):
    with pytest.raises(ExtractionError):
        extract_login_fields(soup_of(form))


def test_login_payload_has_exactly_four_fields(config):
    payload = build_login_payload({"_token": "T1", "returnUrl": "/x"}, config)
    assert payload == {"_token": "T1", "returnUrl": "/x", "login": "user@example.com", "password": "secret"}
    assert list(payload) == ["_token", "returnUrl", "login", "password"]


def test_authenticate_posts_to_login_url(config, login_page, data_page, response_factory):
    session = MagicMock()
    session.request.return_value = response_factory(data_page)

    soup, html = authenticate(session, soup_of(login_page), config)

    assert html == data_page
    assert soup.select_one("div.chart") is not None
    args, kwargs = session.request.call_args
    assert args == ("POST", LOGIN_URL)
    assert kwargs["data"] == {"_token": "T1", "returnUrl": "/x", "login": "user@example.com", "password": "secret"}


def test_rejected_login_only_warns(config, login_page, response_factory, caplog):
    session = MagicMock()
    session.request.return_value = response_factory(login_page)

    with caplog.at_level(logging.DEBUG, logger="est-reader"):
        _, html = authenticate(session, soup_of(login_page), config)

    assert html == login_page
    assert "check credentials" in caplog.text
    assert "secret" not in caplog.text
    assert "user@example.com" not in caplog.text
    assert "12345" in caplog.text

from unittest.mock import MagicMock

import pytest
import requests

from est_reader import ClientConfig, PortalClient

CHART_JSON = (
    '{"values":{"A+":{"total":{"data":[{"timestamp":"2024-03-05T00:00:00","value":1.23}]}},'
    '"A-":{"total":{"data":[]}}}}'
)

DATA_PAGE = f"""
<html><body>
  <div class="wrapper">
    <div class="chart" data-values='{CHART_JSON}'></div>
  </div>
</body></html>
"""

LOGIN_PAGE = """
<html><body>
  <form class="authenticate" method="post" action="/lv/private/user-authentification/">
    <input type="hidden" name="_token" value="T1">
    <input type="hidden" name="returnUrl" value="/x">
    <input type="text" name="login">
    <input type="password" name="password">
  </form>
</body></html>
"""


def make_response(text, status_code=200, url="https://www.e-st.lv/"):
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    response.url = url
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=response)
    return response


@pytest.fixture
def config():
    return ClientConfig(login="user@example.com", password="secret", meter_id="12345")


@pytest.fixture
def client(config):
    client = PortalClient(config)
    yield client
    client.close()


@pytest.fixture
def data_page():
    return DATA_PAGE


@pytest.fixture
def login_page():
    return LOGIN_PAGE


@pytest.fixture
def response_factory():
    return make_response

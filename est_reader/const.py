"""Constants for the e-st.lv portal."""

BASE_URL = "https://www.e-st.lv"
LOGIN_URL = f"{BASE_URL}/lv/private/user-authentification/"
DATA_URL = f"{BASE_URL}/lv/private/paterini-un-norekini/paterinu-grafiki/"

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/97.0.4692.71 Safari/537.36"
    ),
    "Content-Type": "application/x-www-form-urlencoded",
    "Referer": BASE_URL,
}

REQUEST_TIMEOUT = 30
MAX_REDIRECTS = 3

TOKEN_FIELD = "_token"
RETURN_URL_FIELD = "returnUrl"
LOGIN_FIELD = "login"
PASSWORD_FIELD = "password"

LOGIN_FORM_SELECTOR = "form.authenticate"
CHART_SELECTOR = "div.chart"
CHART_ATTRIBUTE = "data-values"

DIRECTIONS = {
    "A+": "consumed",
    "A-": "returned",
}

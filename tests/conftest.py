"""Pytest configuration and fixtures."""
import os
import tempfile
from pathlib import Path

import pytest

# Logs go to a temporary directory instead of the project tree.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="valuta_picker_tests_"))
_PYPROJECT = _TMP_DIR / "pyproject.toml"
_PYPROJECT.write_text(
    "[tool.valuta_picker]\n"
    f'log_path = "{(_TMP_DIR / "actions.log").as_posix()}"\n'
    f'api_log_path = "{(_TMP_DIR / "api.log").as_posix()}"\n',
    encoding="utf-8",
)
os.environ["VALUTA_PICKER_PYPROJECT_PATH"] = str(_PYPROJECT)

from valuta_picker.core.currencies import Currency, CurrencyCatalog  # noqa: E402
from valuta_picker.rates_service.api_clients import FreeCurrencyApiClient  # noqa: E402
from valuta_picker.rates_service.config import ApiConfig  # noqa: E402

CURRENCIES_PAYLOAD = {
    "data": {
        "USD": {
            "symbol": "$",
            "name": "US Dollar",
            "symbol_native": "$",
            "decimal_digits": 2,
            "rounding": 0,
            "code": "USD",
            "name_plural": "US dollars",
        },
        "EUR": {
            "symbol": "€",
            "name": "Euro",
            "symbol_native": "€",
            "decimal_digits": 2,
            "rounding": 0,
            "code": "EUR",
            "name_plural": "Euros",
        },
        "GBP": {
            "symbol": "£",
            "name": "British Pound Sterling",
            "symbol_native": "£",
            "decimal_digits": 2,
            "rounding": 0,
            "code": "GBP",
            "name_plural": "British pounds sterling",
        },
    }
}


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json
        self.headers = {}

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class RecordingGet:
    """Replacement for requests.get that records calls and replays responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def catalog():
    return CurrencyCatalog.from_response(CURRENCIES_PAYLOAD)


@pytest.fixture
def api_config():
    return ApiConfig(api_key="secret-key", base_url="https://api.example.test/v1")


@pytest.fixture
def client(api_config):
    return FreeCurrencyApiClient(api_config)


@pytest.fixture
def fake_get(monkeypatch):
    """Install a RecordingGet; call the fixture with the responses to replay."""

    def install(*responses):
        recorder = RecordingGet(*responses)
        monkeypatch.setattr(
            "valuta_picker.rates_service.api_clients.requests.get",
            recorder,
        )
        return recorder

    return install


@pytest.fixture
def sample_currency():
    return Currency(code="usd", name=" US Dollar ")

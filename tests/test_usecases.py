from valuta_picker.core import usecases
from valuta_picker.core.usecases import ConversionLine, build_conversion_lines
from conftest import CURRENCIES_PAYLOAD, FakeResponse


def test_convert_keeps_requested_order(client, fake_get):
    fake_get(FakeResponse({"data": {"USD": 1.1, "AUD": 1.5}}))
    lines = usecases.convert(client, "EUR", ["USD", "AUD"], 2.0)
    assert [line.format() for line in lines] == [
        "2.000000 EUR = 2.200000 USD",
        "2.000000 EUR = 3.000000 AUD",
    ]


def test_missing_rate_is_zero(client, fake_get):
    fake_get(FakeResponse({"data": {"USD": 1.1}}))
    lines = usecases.convert(client, "EUR", ["JPY", "USD"], 3.0)
    assert lines[0].format() == "3.000000 EUR = 0.000000 JPY"
    assert lines[1].format() == "3.000000 EUR = 3.300000 USD"


def test_convert_drops_duplicate_targets(client, fake_get):
    recorder = fake_get(FakeResponse({"data": {"USD": 1.1}}))
    lines = usecases.convert(client, "EUR", ["USD", "USD"], 1.0)
    assert len(lines) == 1
    assert recorder.calls[0]["params"]["currencies"] == "USD"


def test_line_without_quantity():
    line = ConversionLine(base="EUR", target="USD", rate=1.08)
    assert line.value == 1.08
    assert line.format() == "1 EUR = 1.080000 USD"


def test_build_conversion_lines():
    lines = build_conversion_lines("USD", ["EUR"], {"EUR": 0.5}, 10.0)
    assert lines == [ConversionLine(base="USD", target="EUR", rate=0.5, quantity=10.0)]
    assert lines[0].value == 5.0


def test_load_catalog(client, fake_get):
    fake_get(FakeResponse(CURRENCIES_PAYLOAD))
    catalog = usecases.load_catalog(client)
    assert catalog.choices[0] == "EUR (Euro)"


def test_latest_values_in_request_order(client, fake_get):
    fake_get(FakeResponse({"data": {"EUR": 0.9}}))
    values = usecases.latest_values(client, "USD", ["GBP", "EUR"])
    assert list(values.items()) == [("GBP", 0.0), ("EUR", 0.9)]

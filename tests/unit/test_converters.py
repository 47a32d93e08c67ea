from datetime import date, datetime
from decimal import Decimal

import pytest

from biis_import.common.errors import ConversionError
from biis_import.model.enums import (
    AreaMeasurement,
    ConstructionPhase,
    Country,
    UseType,
    ValuationType1,
    ValuationType2,
)
from biis_import.read import converters as conv


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("qm", AreaMeasurement.SQM),
        ("sqft", AreaMeasurement.SQFT),
        ("tsubo", AreaMeasurement.TSUBO),
        ("pyeong", AreaMeasurement.TSUBO),
        ("xyz", AreaMeasurement.NOT_SPECIFIED),
        ("QM", AreaMeasurement.NOT_SPECIFIED),
        ("", AreaMeasurement.NOT_SPECIFIED),
        (None, AreaMeasurement.NOT_SPECIFIED),
    ],
)
def test_area_measurement_never_returns_none(token, expected):
    assert conv.convert_area_measurement(token) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("Buero", UseType.OFFICE),
        ("Handel", UseType.RETAIL),
        ("Industrie(Lager,Hallen)", UseType.INDUSTRY),
        ("Keller/Archiv", UseType.OTHER),
        ("Wohnen", UseType.RESIDENTIAL),
        ("Garage/TG", UseType.PARKING),
        ("Aussenstellplaetze", UseType.PARKING),
        ("unbekannt", UseType.NOT_SPECIFIED),
        ("Spielhalle", UseType.NOT_SPECIFIED),
        (None, UseType.NOT_SPECIFIED),
    ],
)
def test_use_type_never_returns_none(token, expected):
    assert conv.convert_use_type(token) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TRUE", True), ("true", True), ("True", True), ("FALSE", False), ("false", False), ("", None), ("maybe", None), (None, None)],
)
def test_boolean(token, expected):
    assert conv.convert_boolean(token) is expected


def test_construction_phase_codes():
    assert conv.convert_construction_phase("F") is ConstructionPhase.COMPLETED
    assert conv.convert_construction_phase("I") is ConstructionPhase.IN_COMPLETION
    assert conv.convert_construction_phase("P") is ConstructionPhase.PLANNED
    assert conv.convert_construction_phase("0") is ConstructionPhase.OTHER
    assert conv.convert_construction_phase("X") is None


def test_valuation_types():
    assert conv.convert_valuation_type1("Fondsgutachten") is ValuationType1.FUND
    assert conv.convert_valuation_type1("Privatgutachten") is ValuationType1.PRIVATE
    assert conv.convert_valuation_type1("Gerichtsgutachten") is ValuationType1.COURT
    assert conv.convert_valuation_type1("Fremdgutachten") is ValuationType1.THIRD_PERSON
    assert conv.convert_valuation_type1("U") is None
    assert conv.convert_valuation_type2("U") is ValuationType2.UNKNOWN
    assert conv.convert_valuation_type2("E") is ValuationType2.FIRST_VALUATION
    assert conv.convert_valuation_type2("N") is ValuationType2.REVALUATION
    assert conv.convert_valuation_type2("V") is ValuationType2.MARKET_VALUATION_REPORT
    assert conv.convert_valuation_type2("Fondsgutachten") is None


@pytest.mark.parametrize(
    "converter",
    [
        conv.convert_ownership_type,
        conv.convert_retail_location,
        conv.convert_condition,
        conv.convert_interior_quality,
    ],
)
@pytest.mark.parametrize("token", ["U", "E", "N", "V", "", "anything", None])
def test_unmapped_converters_always_yield_none(converter, token):
    assert converter(token) is None


def test_decimal_parses_and_rejects():
    assert conv.convert_decimal("52.520008") == Decimal("52.520008")
    assert conv.convert_decimal(" 7 ") == Decimal("7")
    assert conv.convert_decimal(None) is None
    with pytest.raises(ConversionError):
        conv.convert_decimal("")
    with pytest.raises(ConversionError) as excinfo:
        conv.convert_decimal("12,5")
    assert excinfo.value.token == "12,5"


def test_date_accepts_calendar_dates_and_datetimes():
    assert conv.convert_date("2016-03-01") == date(2016, 3, 1)
    assert conv.convert_date("2016-03") == date(2016, 3, 1)
    assert conv.convert_date("1985") == date(1985, 1, 1)
    assert conv.convert_date("2016-03-01T10:00:00") == date(2016, 3, 1)


@pytest.mark.parametrize("token", ["", "01.03.2016", "2016-13-01", "2016-02-30", "yesterday"])
def test_date_rejects_malformed_text(token):
    with pytest.raises(ConversionError):
        conv.convert_date(token)


def test_datetime_parsing():
    assert conv.convert_datetime("2016-03-01T10:00:00") == datetime(2016, 3, 1, 10, 0, 0)
    assert conv.convert_datetime("2016-03-01") == datetime(2016, 3, 1)
    with pytest.raises(ConversionError):
        conv.convert_datetime("10:00")


def test_currency_lookup():
    assert conv.convert_currency("EUR") == "EUR"
    assert conv.convert_currency("CHF") == "CHF"
    with pytest.raises(ConversionError):
        conv.convert_currency("XYZ")
    with pytest.raises(ConversionError):
        conv.convert_currency("eur")


def test_country_lookup():
    assert conv.convert_country("DE") is Country.DE
    assert conv.convert_country("  ") is None
    assert conv.convert_country("") is None
    assert conv.convert_country("Germany") is None


def test_falls_back_reports_unrecognised_tokens_only():
    assert conv.falls_back(conv.convert_use_type, "Spielhalle")
    assert not conv.falls_back(conv.convert_use_type, "unbekannt")
    assert not conv.falls_back(conv.convert_boolean, "TRUE")
    assert conv.falls_back(conv.convert_boolean, "maybe")
    assert conv.falls_back(conv.convert_interior_quality, "E")
    assert not conv.falls_back(conv.convert_area_measurement, "  ")
    assert not conv.falls_back(conv.convert_decimal, "1.5")


@pytest.mark.parametrize("token", ["1_000", "sNaN", "NaN", "-Infinity", "١٢"])
def test_decimal_accepts_plain_numerals_only(token):
    with pytest.raises(ConversionError) as excinfo:
        conv.convert_decimal(token)
    assert excinfo.value.token == token


def test_decimal_accepts_sign_and_exponent():
    assert conv.convert_decimal("-0.5") == Decimal("-0.5")
    assert conv.convert_decimal("1.5E3") == Decimal("1500")
    assert conv.convert_decimal(".25") == Decimal("0.25")


def test_integer_parses_and_rejects():
    assert conv.convert_integer(" 1985 ") == 1985
    assert conv.convert_integer("-3") == -3
    assert conv.convert_integer(None) is None
    for token in ("19x5", "", "1_000", "4.0"):
        with pytest.raises(ConversionError) as excinfo:
            conv.convert_integer(token)
        assert excinfo.value.token == token


def test_datetime_rejects_utc_offset():
    with pytest.raises(ConversionError):
        conv.convert_datetime("2016-03-01T10:00:00+01:00")

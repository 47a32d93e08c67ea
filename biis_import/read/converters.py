"""Conversion of BIIS source tokens into GIF model values.

Every converter is a pure ``token -> value`` function. Enumerated converters
fall back to ``None`` or a "not specified" member for unknown tokens and never
raise; decimal, integer, date and currency conversion raise ``ConversionError``
on text they cannot read.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from biis_import.common.errors import ConversionError
from biis_import.common.time_utils import parse_iso_date, parse_iso_datetime
from biis_import.model.enums import (
    CURRENCY_CODES,
    AreaMeasurement,
    ConstructionPhase,
    Country,
    InteriorQuality,
    ObjectCondition,
    OwnershipType,
    RetailLocationType,
    UseType,
    ValuationType1,
    ValuationType2,
)

# Plain ASCII numerals only: no NaN/Infinity, no digit-group underscores.
_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

AREA_MEASUREMENT_TOKENS = {
    "sqft": AreaMeasurement.SQFT,
    "qm": AreaMeasurement.SQM,
    "tsubo": AreaMeasurement.TSUBO,
    "pyeong": AreaMeasurement.TSUBO,
}

CONSTRUCTION_PHASE_TOKENS = {
    "F": ConstructionPhase.COMPLETED,
    "I": ConstructionPhase.IN_COMPLETION,
    "P": ConstructionPhase.PLANNED,
    "0": ConstructionPhase.OTHER,
}

VALUATION_TYPE1_TOKENS = {
    "Fondsgutachten": ValuationType1.FUND,
    "Privatgutachten": ValuationType1.PRIVATE,
    "Gerichtsgutachten": ValuationType1.COURT,
    "Fremdgutachten": ValuationType1.THIRD_PERSON,
}

VALUATION_TYPE2_TOKENS = {
    "U": ValuationType2.UNKNOWN,
    "E": ValuationType2.FIRST_VALUATION,
    "N": ValuationType2.REVALUATION,
    "V": ValuationType2.MARKET_VALUATION_REPORT,
}

USE_TYPE_TOKENS = {
    "Buero": UseType.OFFICE,
    "Handel": UseType.RETAIL,
    "Industrie(Lager,Hallen)": UseType.INDUSTRY,
    "Keller/Archiv": UseType.OTHER,
    "Gastronomie": UseType.GASTRONOMY,
    "Hotel": UseType.HOTEL,
    "Wohnen": UseType.RESIDENTIAL,
    "Freizeit": UseType.LEISURE,
    "Garage/TG": UseType.PARKING,
    "Aussenstellplaetze": UseType.PARKING,
    "unbekannt": UseType.NOT_SPECIFIED,
}

# No BIIS codes are mapped for these yet; every token yields None.
OWNERSHIP_TYPE_TOKENS: dict[str, OwnershipType] = {}
RETAIL_LOCATION_TOKENS: dict[str, RetailLocationType] = {}
CONDITION_TOKENS: dict[str, ObjectCondition] = {}
INTERIOR_QUALITY_TOKENS: dict[str, InteriorQuality] = {}


def convert_area_measurement(token: str | None) -> AreaMeasurement:
    return AREA_MEASUREMENT_TOKENS.get(token, AreaMeasurement.NOT_SPECIFIED)


def convert_decimal(token: str | None) -> Decimal | None:
    if token is None:
        return None
    text = token.strip()
    if not _DECIMAL_RE.match(text):
        raise ConversionError(f"Invalid decimal: {token!r}", token=token)
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ConversionError(f"Invalid decimal: {token!r}", token=token) from exc


def convert_integer(token: str | None) -> int | None:
    if token is None:
        return None
    text = token.strip()
    if not _INTEGER_RE.match(text):
        raise ConversionError(f"Invalid integer: {token!r}", token=token)
    return int(text)


def convert_boolean(token: str | None) -> bool | None:
    if token is None:
        return None
    upper = token.upper()
    if upper == "TRUE":
        return True
    if upper == "FALSE":
        return False
    return None


def convert_date(token: str | None) -> date | None:
    if token is None:
        return None
    try:
        return parse_iso_date(token)
    except ValueError as exc:
        raise ConversionError(f"Invalid date: {token!r}", token=token) from exc


def convert_datetime(token: str | None) -> datetime | None:
    if token is None:
        return None
    try:
        return parse_iso_datetime(token)
    except ValueError as exc:
        raise ConversionError(f"Invalid date-time: {token!r}", token=token) from exc


def convert_currency(token: str | None) -> str | None:
    if token is None:
        return None
    code = token.strip()
    if code not in CURRENCY_CODES:
        raise ConversionError(f"Unknown currency code: {token!r}", token=token)
    return code


def convert_country(token: str | None) -> Country | None:
    if token is None or not token.strip():
        return None
    return Country.__members__.get(token.strip())


def convert_construction_phase(token: str | None) -> ConstructionPhase | None:
    return CONSTRUCTION_PHASE_TOKENS.get(token)


def convert_valuation_type1(token: str | None) -> ValuationType1 | None:
    return VALUATION_TYPE1_TOKENS.get(token)


def convert_valuation_type2(token: str | None) -> ValuationType2 | None:
    return VALUATION_TYPE2_TOKENS.get(token)


def convert_use_type(token: str | None) -> UseType:
    return USE_TYPE_TOKENS.get(token, UseType.NOT_SPECIFIED)


def convert_ownership_type(token: str | None) -> OwnershipType | None:
    return OWNERSHIP_TYPE_TOKENS.get(token)


def convert_retail_location(token: str | None) -> RetailLocationType | None:
    return RETAIL_LOCATION_TOKENS.get(token)


def convert_condition(token: str | None) -> ObjectCondition | None:
    return CONDITION_TOKENS.get(token)


def convert_interior_quality(token: str | None) -> InteriorQuality | None:
    return INTERIOR_QUALITY_TOKENS.get(token)


_RECOGNISERS: dict[Callable[[str | None], Any], Callable[[str], bool]] = {
    convert_area_measurement: AREA_MEASUREMENT_TOKENS.__contains__,
    convert_boolean: lambda token: token.upper() in ("TRUE", "FALSE"),
    convert_country: lambda token: token.strip() in Country.__members__,
    convert_construction_phase: CONSTRUCTION_PHASE_TOKENS.__contains__,
    convert_valuation_type1: VALUATION_TYPE1_TOKENS.__contains__,
    convert_valuation_type2: VALUATION_TYPE2_TOKENS.__contains__,
    convert_use_type: USE_TYPE_TOKENS.__contains__,
    convert_ownership_type: OWNERSHIP_TYPE_TOKENS.__contains__,
    convert_retail_location: RETAIL_LOCATION_TOKENS.__contains__,
    convert_condition: CONDITION_TOKENS.__contains__,
    convert_interior_quality: INTERIOR_QUALITY_TOKENS.__contains__,
}


def falls_back(converter: Callable[[str | None], Any], token: str) -> bool:
    """True when ``converter`` would answer ``token`` with its default value.

    Blank tokens never count; neither do converters without a vocabulary.
    """
    recogniser = _RECOGNISERS.get(converter)
    if recogniser is None or not token.strip():
        return False
    return not recogniser(token)

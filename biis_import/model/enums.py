"""Enumerations of the GIF exchange model used by the BIIS import."""

from __future__ import annotations

from enum import Enum


class Subset(str, Enum):
    S5_7 = "S5_7"


class AreaMeasurement(str, Enum):
    SQM = "SQM"
    SQFT = "SQFT"
    TSUBO = "TSUBO"
    NOT_SPECIFIED = "NOT_SPECIFIED"


class ConstructionPhase(str, Enum):
    COMPLETED = "COMPLETED"
    IN_COMPLETION = "IN_COMPLETION"
    PLANNED = "PLANNED"
    OTHER = "OTHER"


class ValuationType1(str, Enum):
    FUND = "FUND"
    PRIVATE = "PRIVATE"
    COURT = "COURT"
    THIRD_PERSON = "THIRD_PERSON"


class ValuationType2(str, Enum):
    UNKNOWN = "UNKNOWN"
    FIRST_VALUATION = "FIRST_VALUATION"
    REVALUATION = "REVALUATION"
    MARKET_VALUATION_REPORT = "MARKET_VALUATION_REPORT"


class UseType(str, Enum):
    OFFICE = "OFFICE"
    RETAIL = "RETAIL"
    INDUSTRY = "INDUSTRY"
    GASTRONOMY = "GASTRONOMY"
    HOTEL = "HOTEL"
    RESIDENTIAL = "RESIDENTIAL"
    LEISURE = "LEISURE"
    PARKING = "PARKING"
    OTHER = "OTHER"
    NOT_SPECIFIED = "NOT_SPECIFIED"


class InteriorQuality(str, Enum):
    SIMPLE = "SIMPLE"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    LUXURY = "LUXURY"


class ObjectCondition(str, Enum):
    POOR = "POOR"
    AVERAGE = "AVERAGE"
    GOOD = "GOOD"
    VERY_GOOD = "VERY_GOOD"


class OwnershipType(str, Enum):
    SOLE_OWNERSHIP = "SOLE_OWNERSHIP"
    PART_OWNERSHIP = "PART_OWNERSHIP"
    CONDOMINIUM = "CONDOMINIUM"
    HEREDITARY_BUILDING_RIGHT = "HEREDITARY_BUILDING_RIGHT"


class RetailLocationType(str, Enum):
    PRIME = "PRIME"
    SECONDARY = "SECONDARY"
    PERIPHERAL = "PERIPHERAL"
    SHOPPING_CENTRE = "SHOPPING_CENTRE"


# ISO 3166-1 alpha-2
_COUNTRY_CODES = """
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI BJ BL
BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV
CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK FM FO FR GA GB GD
GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT HU ID IE IL IM
IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW KY KZ LA LB LC LI LK
LR LS LT LU LV LY MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW
MX MY MZ NA NC NE NF NG NI NL NO NP NR NU NZ OM PA PE PF PG PH PK PL PM PN PR
PS PT PW PY QA RE RO RS RU RW SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS
ST SV SX SY SZ TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ UA UG UM US UY
UZ VA VC VE VG VI VN VU WF WS YE YT ZA ZM ZW
""".split()

Country = Enum("Country", [(code, code) for code in _COUNTRY_CODES], type=str, module=__name__)

# ISO 4217 active codes
CURRENCY_CODES = frozenset(
    """
AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB BRL
BSD BTN BWP BYN BZD CAD CDF CHF CLP CNY COP CRC CUC CUP CVE CZK DJF DKK DOP DZD
EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD HNL HRK HTG HUF IDR
ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW KWD KYD KZT LAK LBP LKR
LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN MYR MZN NAD NGN NIO
NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD RUB RWF SAR SBD SCR SDG
SEK SGD SHP SLE SLL SOS SRD SSP STN SVC SYP SZL THB TJS TMT TND TOP TRY TTD TWD
TZS UAH UGX USD UYU UZS VES VND VUV WST XAF XCD XOF XPF YER ZAR ZMW ZWL
""".split()
)

"""
Field Normalizer

Architectural Intent:
- Pure, total mappings from loosely formatted operator input to the canonical
  values the Azure support API accepts
- Lookup tables are immutable maps; none of the functions ever raise

Tables:
- Severity: "1" / "A" / "B" / "C" shortcuts plus full names
- Time zone: common abbreviations and UTC offsets to Windows zone names
- Country: ISO 3166 alpha-2 to alpha-3
"""

import logging
from types import MappingProxyType

from azticket.domain.value_objects.severity import Severity

logger = logging.getLogger(__name__)


SEVERITY_ALIASES = MappingProxyType({
    "1": Severity.HIGHEST_CRITICAL,
    "highest-critical": Severity.HIGHEST_CRITICAL,
    "highestcriticalimpact": Severity.HIGHEST_CRITICAL,
    "a": Severity.CRITICAL,
    "critical": Severity.CRITICAL,
    "severe": Severity.SEVERE,
    "b": Severity.MODERATE,
    "moderate": Severity.MODERATE,
    "c": Severity.MINIMAL,
    "minimal": Severity.MINIMAL,
})

TIME_ZONE_ALIASES = MappingProxyType({
    "PST": "Pacific Standard Time",
    "PDT": "Pacific Standard Time",
    "MST": "Mountain Standard Time",
    "MDT": "Mountain Standard Time",
    "CST": "Central Standard Time",
    "CDT": "Central Standard Time",
    "EST": "Eastern Standard Time",
    "EDT": "Eastern Standard Time",
    "UTC": "UTC",
    "GMT": "GMT Standard Time",
    "IST": "India Standard Time",
    "UTC-8": "Pacific Standard Time",
    "UTC-7": "Mountain Standard Time",
    "UTC-6": "Central Standard Time",
    "UTC-5": "Eastern Standard Time",
    "UTC-4": "Atlantic Standard Time",
    "UTC-3": "SA Eastern Standard Time",
    "UTC+1": "W. Europe Standard Time",
    "UTC+2": "E. Europe Standard Time",
    "UTC+3": "Russian Standard Time",
    "UTC+4": "Arabian Standard Time",
    "UTC+5": "Pakistan Standard Time",
    "UTC+6": "Central Asia Standard Time",
    "UTC+7": "SE Asia Standard Time",
    "UTC+8": "China Standard Time",
})

COUNTRY_ALPHA3 = MappingProxyType({
    "AE": "ARE",
    "AR": "ARG",
    "AT": "AUT",
    "AU": "AUS",
    "BE": "BEL",
    "BR": "BRA",
    "CA": "CAN",
    "CH": "CHE",
    "CL": "CHL",
    "CN": "CHN",
    "CO": "COL",
    "CZ": "CZE",
    "DE": "DEU",
    "DK": "DNK",
    "EG": "EGY",
    "ES": "ESP",
    "FI": "FIN",
    "FR": "FRA",
    "GB": "GBR",
    "GR": "GRC",
    "HK": "HKG",
    "HU": "HUN",
    "ID": "IDN",
    "IE": "IRL",
    "IL": "ISR",
    "IN": "IND",
    "IT": "ITA",
    "JP": "JPN",
    "KR": "KOR",
    "MX": "MEX",
    "MY": "MYS",
    "NG": "NGA",
    "NL": "NLD",
    "NO": "NOR",
    "NZ": "NZL",
    "PH": "PHL",
    "PL": "POL",
    "PT": "PRT",
    "RO": "ROU",
    "SA": "SAU",
    "SE": "SWE",
    "SG": "SGP",
    "TH": "THA",
    "TR": "TUR",
    "TW": "TWN",
    "UA": "UKR",
    "UK": "GBR",
    "US": "USA",
    "VN": "VNM",
    "ZA": "ZAF",
})


def normalize_severity(raw: str) -> Severity:
    key = (raw or "").strip().lower()
    severity = SEVERITY_ALIASES.get(key)
    if severity is None:
        logger.warning("Unrecognized severity %r, defaulting to %s", raw, Severity.MINIMAL)
        return Severity.MINIMAL
    return severity


def normalize_time_zone(raw: str) -> str:
    value = (raw or "").strip()
    return TIME_ZONE_ALIASES.get(value.upper(), value)


def normalize_country(raw: str) -> str:
    code = (raw or "").strip().upper()
    if len(code) == 3:
        return code
    return COUNTRY_ALPHA3.get(code, code)

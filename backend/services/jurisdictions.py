"""Static per-jurisdiction reference data: tax rates, notice rules and legal-fee pricing.

All tables are module-level constants built once at import time and never
mutated afterwards. Lookups are pure; unrecognized codes get the documented
defaults (5% tax, standard 8-week notice rule, generic pricing tier).
"""

from types import MappingProxyType

from models.schemas.jurisdiction_pricing import FeeRange, JurisdictionPricing

DEFAULT_TAX_RATE = 0.05

# GST/HST/PST/QST combined rates as of 2024.
TAX_RATES = MappingProxyType({
    "ON": 0.13,
    "BC": 0.12,
    "AB": 0.05,
    "SK": 0.11,
    "MB": 0.12,
    "NS": 0.15,
    "NB": 0.15,
    "NL": 0.15,
    "PE": 0.15,
    "NT": 0.05,
    "YT": 0.05,
    "NU": 0.05,
    "QC": 0.14975,
    "Federal": 0.05,
})

_HST = frozenset({"ON", "NS", "NB", "NL", "PE"})
_GST_PST = frozenset({"BC", "SK", "MB"})

# ---------------------------------------------------------------------------
# Statutory notice rules
# ---------------------------------------------------------------------------

FORMULA_STANDARD = "standard-cap"
FORMULA_FEDERAL = "federal-tiered"

# code -> (formula tag, cap in weeks); anything missing uses DEFAULT_NOTICE_RULE
NOTICE_RULES = MappingProxyType({
    "ON": (FORMULA_STANDARD, 8),
    "BC": (FORMULA_STANDARD, 8),
    "AB": (FORMULA_STANDARD, 8),
    "SK": (FORMULA_STANDARD, 8),
    "MB": (FORMULA_STANDARD, 8),
    "NS": (FORMULA_STANDARD, 8),
    "NB": (FORMULA_STANDARD, 4),
    "NL": (FORMULA_STANDARD, 8),
    "PE": (FORMULA_STANDARD, 4),
    "NT": (FORMULA_STANDARD, 8),
    "YT": (FORMULA_STANDARD, 8),
    "NU": (FORMULA_STANDARD, 8),
    "QC": (FORMULA_STANDARD, 8),
    "Federal": (FORMULA_FEDERAL, 8),
})
DEFAULT_NOTICE_RULE = (FORMULA_STANDARD, 8)

# Employment-standards severance pay exists in Ontario only.
SEVERANCE_JURISDICTION = "ON"
SEVERANCE_PAYROLL_THRESHOLD = 2_500_000
SEVERANCE_MIN_YEARS = 5
SEVERANCE_CAP_WEEKS = 26

# ---------------------------------------------------------------------------
# Legal-fee pricing
# ---------------------------------------------------------------------------


def _tier(
    code: str,
    consultation: tuple[float, float, float],
    hourly: tuple[float, float, float],
    flat: tuple[float, float],
    contingency: float = 25,
) -> JurisdictionPricing:
    return JurisdictionPricing(
        jurisdiction=code,
        consultation_fee=FeeRange(min=consultation[0], max=consultation[1], average=consultation[2]),
        hourly_rate=FeeRange(min=hourly[0], max=hourly[1], average=hourly[2]),
        flat_fee_range=FeeRange(min=flat[0], max=flat[1]),
        contingency_percentage=contingency,
    )


_MAJOR = ((200, 500, 350), (300, 600, 450), (2000, 5000))
_WESTERN_NORTH = ((200, 450, 325), (275, 550, 400), (1800, 4500))
_PRAIRIE_ATLANTIC = ((150, 400, 275), (250, 500, 375), (1500, 4000))
_PEI = ((150, 350, 250), (225, 450, 350), (1200, 3500))

PRICING = MappingProxyType({
    "ON": _tier("ON", *_MAJOR),
    "BC": _tier("BC", *_MAJOR),
    "AB": _tier("AB", *_WESTERN_NORTH),
    "SK": _tier("SK", *_PRAIRIE_ATLANTIC),
    "MB": _tier("MB", *_PRAIRIE_ATLANTIC),
    "NS": _tier("NS", *_PRAIRIE_ATLANTIC),
    "NB": _tier("NB", *_PRAIRIE_ATLANTIC),
    "NL": _tier("NL", *_PRAIRIE_ATLANTIC),
    "PE": _tier("PE", *_PEI),
    "NT": _tier("NT", *_WESTERN_NORTH),
    "YT": _tier("YT", *_WESTERN_NORTH),
    "NU": _tier("NU", *_WESTERN_NORTH),
    "QC": _tier("QC", *_MAJOR),
    "Federal": _tier("Federal", *_MAJOR),
})

DEFAULT_PRICING = _tier("default", *_MAJOR)


def list_jurisdictions() -> list[str]:
    return list(TAX_RATES)


def is_known_jurisdiction(code: str) -> bool:
    return code in TAX_RATES


def lookup_tax_rate(jurisdiction: str) -> float:
    """Combined sales-tax rate applied to legal fees."""
    return TAX_RATES.get(jurisdiction, DEFAULT_TAX_RATE)


def lookup_pricing(jurisdiction: str) -> JurisdictionPricing:
    return PRICING.get(jurisdiction, DEFAULT_PRICING)


def lookup_notice_rule(jurisdiction: str) -> tuple[str, int]:
    return NOTICE_RULES.get(jurisdiction, DEFAULT_NOTICE_RULE)


def tax_label(jurisdiction: str) -> str:
    if jurisdiction in _HST:
        return "HST"
    if jurisdiction == "QC":
        return "GST+QST"
    if jurisdiction in _GST_PST:
        return "GST+PST"
    return "GST"


def check_tables() -> None:
    """Verify that every table covers the same jurisdiction codes.

    Raises:
        RuntimeError: if a code is present in one table but not the others.
    """
    codes = set(TAX_RATES)
    for name, table in (("NOTICE_RULES", NOTICE_RULES), ("PRICING", PRICING)):
        if set(table) != codes:
            missing = sorted(codes.symmetric_difference(table))
            raise RuntimeError(f"{name} out of sync with TAX_RATES: {missing}")

"""Day count configuration constants.

No environment variables are read. Pure configuration data.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Convention selectors
# ---------------------------------------------------------------------------

# Canonical spellings, in integer-code order (0..4).
CONVENTION_NAMES: tuple[str, ...] = (
    "nasd30/360",
    "act/act",
    "act360",
    "act365",
    "eur30/360",
)

CONVENTION_CODES: tuple[int, ...] = tuple(range(len(CONVENTION_NAMES)))

# PascalCase variant names written by other yearfrac ports, in code order.
PASCAL_CASE_NAMES: tuple[str, ...] = (
    "US30360",
    "ActAct",
    "Act360",
    "Act365",
    "EU30360",
)


# ---------------------------------------------------------------------------
# Bases (days per year)
# ---------------------------------------------------------------------------

BASIS_360: float = 360.0
BASIS_365: float = 365.0
BASIS_366: float = 366.0


# ---------------------------------------------------------------------------
# US (NASD) 30/360 variants
# ---------------------------------------------------------------------------

NASD_METHOD_DEFAULT: int = 0
NASD_METHOD_ALTERNATE: int = 3  # always clamps Feb month-end and the 31st of the end date
NASD_METHODS: tuple[int, ...] = (NASD_METHOD_DEFAULT, NASD_METHOD_ALTERNATE)

NASD_USE_EOM_DEFAULT: bool = True

"""
Tolerance tiers for approximate numerical comparison.

Defines the precision expectations used by Vector.allclose and
Matrix.allclose:
- STRICT: machine precision, for results of exact-arithmetic inputs
- DEFAULT: float64 arithmetic with accumulated rounding
- LOOSE: comparisons against hand-rounded reference values

Used by the library and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


STRICT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='strict',
    description='Machine precision',
)

DEFAULT = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='default',
    description='Double precision with accumulated rounding',
)

LOOSE = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='loose',
    description='Hand-rounded reference values',
)

_TIERS = {tier.name: tier for tier in (STRICT, DEFAULT, LOOSE)}


def select_tolerance(tier: str | ToleranceTier = DEFAULT) -> ToleranceTier:
    """Resolve a tier name (or pass a ToleranceTier through)."""
    if isinstance(tier, ToleranceTier):
        return tier
    if isinstance(tier, str) and tier.lower() in _TIERS:
        return _TIERS[tier.lower()]
    valid = ', '.join(sorted(_TIERS))
    raise ValueError(f"Unknown tolerance tier: {tier!r}. Valid tiers: {valid}")

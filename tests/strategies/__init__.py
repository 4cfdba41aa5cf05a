"""Hypothesis strategies for bigcurrency property-based testing.

Usage:
    from tests.strategies import currency_amounts, digits_infos
"""

from .amounts import (
    currency_amounts,
    digits_infos,
    fraction_amounts,
    huge_amounts,
    small_amounts,
)

__all__ = [
    "currency_amounts",
    "digits_infos",
    "fraction_amounts",
    "huge_amounts",
    "small_amounts",
]

"""CLDR number pattern parsing.

Converts a locale currency pattern such as ``"\xa4#,##0.00;(\xa4#,##0.00)"``
into a NumberFormat descriptor: digit bounds, grouping sizes, and the literal
prefixes and suffixes of positive and negative numbers.

Pattern syntax:
    0  required digit
    #  optional digit
    ,  grouping boundary
    .  decimal separator
    ;  separates the positive and (optional) negative sub-patterns
    '  quote, stripped from negative prefixes and suffixes
    Anything else is literal prefix/suffix text (including the currency sign).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from bigcurrency.constants import (
    DECIMAL_SEP,
    DEFAULT_MIN_INTEGER_DIGITS,
    DIGIT_CHAR,
    GROUP_SEP,
    PATTERN_SEP,
    QUOTE_CHAR,
    ZERO_CHAR,
)
from bigcurrency.diagnostics import ErrorTemplate, FormatError

__all__ = ["NumberFormat", "parse_number_format"]


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Parsed number pattern.

    Immutable. Use dataclasses.replace() to derive a variant with different
    digit bounds.

    Attributes:
        min_int: Minimum integer digits (zero-padded on the left)
        min_frac: Minimum fraction digits
        max_frac: Maximum fraction digits
        pos_prefix: Text before a positive number
        pos_suffix: Text after a positive number
        neg_prefix: Text before a negative number (e.g. "-" or "(")
        neg_suffix: Text after a negative number (e.g. ")")
        group_size: Digits per group, counted from the left of the last group
        last_group_size: Digits in the group adjacent to the decimal point
    """

    min_int: int = DEFAULT_MIN_INTEGER_DIGITS
    min_frac: int = 0
    max_frac: int = 0
    pos_prefix: str = ""
    pos_suffix: str = ""
    neg_prefix: str = ""
    neg_suffix: str = ""
    group_size: int = 0
    last_group_size: int = 0


def _first_placeholder(text: str) -> int:
    """Index of the first '#' or '0' in text, -1 if there is none."""
    for index, char in enumerate(text):
        if char in (DIGIT_CHAR, ZERO_CHAR):
            return index
    return -1


def parse_number_format(pattern: str, minus_sign: str = "-") -> NumberFormat:
    """Parse a CLDR number pattern into a NumberFormat.

    Args:
        pattern: Number pattern, e.g. "\xa4#,##0.00" or "#,##0.00 \xa4"
        minus_sign: Locale minus sign, used when the pattern has no negative
            sub-pattern

    Returns:
        Parsed NumberFormat

    Raises:
        FormatError: If the positive sub-pattern has no digit placeholder

    Examples:
        >>> fmt = parse_number_format("\xa4#,##0.00")
        >>> fmt.pos_prefix, fmt.min_frac, fmt.max_frac, fmt.group_size
        ('\xa4', 2, 2, 3)
        >>> fmt.neg_prefix
        '-\xa4'

        >>> fmt = parse_number_format("#,##0.00;(#,##0.00)")
        >>> fmt.neg_prefix, fmt.neg_suffix
        ('(', ')')

        >>> parse_number_format("#,##,##0.###").last_group_size
        3
    """
    positive, _, negative = pattern.partition(PATTERN_SEP)
    if _first_placeholder(positive) == -1:
        raise FormatError(ErrorTemplate.invalid_pattern(pattern))

    if DECIMAL_SEP in positive:
        integer, _, fraction = positive.partition(DECIMAL_SEP)
    else:
        last_zero = positive.rfind(ZERO_CHAR) + 1
        integer, fraction = positive[:last_zero], positive[last_zero:]

    pos_prefix = integer[: max(0, _first_placeholder(integer))]

    min_frac = max_frac = 0
    suffix_chars: list[str] = []
    for index, char in enumerate(fraction):
        if char == ZERO_CHAR:
            min_frac = max_frac = index + 1
        elif char == DIGIT_CHAR:
            max_frac = index + 1
        else:
            suffix_chars.append(char)
    pos_suffix = "".join(suffix_chars)

    groups = integer.split(GROUP_SEP)
    group_size = len(groups[1]) if len(groups) > 1 else 0
    if len(groups) > 2 and groups[2]:
        last_group_size = len(groups[2])
    else:
        last_group_size = group_size

    if negative:
        trunk_len = len(positive) - len(pos_prefix) - len(pos_suffix)
        start = max(0, _first_placeholder(negative))
        neg_prefix = negative[:start].replace(QUOTE_CHAR, "")
        neg_suffix = negative[start + trunk_len :].replace(QUOTE_CHAR, "")
    else:
        neg_prefix = minus_sign + pos_prefix
        neg_suffix = pos_suffix

    return NumberFormat(
        min_frac=min_frac,
        max_frac=max_frac,
        pos_prefix=pos_prefix,
        pos_suffix=pos_suffix,
        neg_prefix=neg_prefix,
        neg_suffix=neg_suffix,
        group_size=group_size,
        last_group_size=last_group_size,
    )

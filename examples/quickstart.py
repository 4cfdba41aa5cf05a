"""Quickstart example for bigcurrency.

This example demonstrates formatting amounts as currency, from plain
Decimals to values far beyond float precision, across locales and display
modes.

Note: CurrencyTransform returns None for empty input (None, "", NaN).
Check for None before concatenating the result into larger strings.
"""

from decimal import Decimal
from fractions import Fraction

from bigcurrency import CurrencyTransform, InvalidArgumentError, format_currency

# Example 1: Display modes
print("=" * 50)
print("Example 1: Display Modes")
print("=" * 50)

pipe = CurrencyTransform("en-US")

print(pipe.transform(5.1234, "CAD", "code"))
# Output: CAD5.12
print(pipe.transform(5.1234, "CAD", "symbol"))
# Output: CA$5.12
print(pipe.transform(5.1234, "CAD", "symbol-narrow"))
# Output: $5.12
print(pipe.transform(5.1234, "CAD", "Canadian dollars "))
# Output: Canadian dollars 5.12

# Example 2: Digits info
print("\n" + "=" * 50)
print("Example 2: Digits Info ({minInt}.{minFrac}-{maxFrac})")
print("=" * 50)

print(pipe.transform(12, "EUR", "code", "1.1-1"))
# Output: EUR12.0
print(pipe.transform(5.1234, "USD", "code", ".0-3"))
# Output: USD5.123
print(pipe.transform(5.1234, "CAD", "symbol-narrow", "5.2-2"))
# Output: $00,005.12

# Example 3: Arbitrary precision
print("\n" + "=" * 50)
print("Example 3: Arbitrary Precision")
print("=" * 50)

print(pipe.transform("123456789012345678.90"))
# Output: $123,456,789,012,345,678.90
print(pipe.transform(Fraction(1, 3)))
# Output: $0.33
print(pipe.transform(5.005))
# Output: $5.01 (half-up on the decimal text, not the binary float)

# Example 4: Locales and the accounting pattern
print("\n" + "=" * 50)
print("Example 4: Locales")
print("=" * 50)

for locale in ("de-DE", "fr-FR", "en-IN", "ja-JP"):
    print(f"{locale}: {CurrencyTransform(locale).transform('1234567.891', 'EUR')}")

print(format_currency(Decimal("-1234.5"), "en-US", "$", "USD", format_type="accounting"))
# Output: ($1,234.50)

# Example 5: Error handling
print("\n" + "=" * 50)
print("Example 5: Error Handling")
print("=" * 50)

try:
    pipe.transform("twelve")
except InvalidArgumentError as e:
    print(f"Rejected: {e}")
    if e.cause is not None and getattr(e.cause, "diagnostic", None) is not None:
        print(e.cause.diagnostic.format_error())  # type: ignore[attr-defined]

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)

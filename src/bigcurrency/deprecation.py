"""Deprecation utilities for bigcurrency.

Provides standardized deprecation warnings with clear migration guidance.

Policy:
    - Deprecated features remain functional for at least 2 minor versions
    - Deprecation warnings include version where feature will be removed
    - Warnings include migration guidance pointing to replacement

Python 3.13+.
"""

import warnings

__all__ = ["warn_deprecated"]


def warn_deprecated(
    feature: str,
    *,
    removal_version: str,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Issue a deprecation warning with standardized message format.

    Args:
        feature: Name of the deprecated feature
        removal_version: Version when feature will be removed (e.g., "1.0.0")
        alternative: Suggested replacement (optional)
        stacklevel: Stack level for warning (default: 2, caller's caller)

    Note:
        Uses DeprecationWarning (not FutureWarning) per Python convention.
        Callers decide how it surfaces via the warnings filters
        (``warnings.catch_warnings``, ``-W error``, pytest's recwarn).

    Example:
        >>> warn_deprecated(
        ...     "Boolean display",
        ...     removal_version="1.0.0",
        ...     alternative="'symbol' or 'code'",
        ... )
        # Issues: DeprecationWarning: Boolean display is deprecated and will be
        # removed in version 1.0.0. Use 'symbol' or 'code' instead.
    """
    msg = f"{feature} is deprecated and will be removed in version {removal_version}."
    if alternative:
        msg += f" Use {alternative} instead."

    warnings.warn(msg, DeprecationWarning, stacklevel=stacklevel)

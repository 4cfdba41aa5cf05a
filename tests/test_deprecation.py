"""Tests for deprecation utilities.

Python 3.13+.
"""

import warnings

from hypothesis import given
from hypothesis import strategies as st

from bigcurrency.deprecation import warn_deprecated


class TestWarnDeprecated:
    """Message format and warning category."""

    def test_basic_message_format(self) -> None:
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            warn_deprecated("old_display", removal_version="1.0.0")

        assert len(w) == 1
        assert issubclass(w[0].category, DeprecationWarning)
        assert str(w[0].message) == "old_display is deprecated and will be removed in version 1.0.0."

    def test_with_alternative(self) -> None:
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            warn_deprecated("old_display", removal_version="1.0.0", alternative="'symbol'")

        assert str(w[0].message) == (
            "old_display is deprecated and will be removed in version 1.0.0. "
            "Use 'symbol' instead."
        )

    def test_stacklevel_points_at_caller(self) -> None:
        def deprecated_api() -> None:
            warn_deprecated("deprecated_api()", removal_version="1.0.0", stacklevel=2)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            deprecated_api()

        assert w[0].filename == __file__

    @given(
        feature=st.text(min_size=1, max_size=30),
        version=st.from_regex(r"\A\d+\.\d+\.\d+\Z"),
    )
    def test_message_contains_feature_and_version(self, feature: str, version: str) -> None:
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            warn_deprecated(feature, removal_version=version)

        message = str(w[0].message)
        assert message.startswith(feature)
        assert version in message

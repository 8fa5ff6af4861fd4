"""Tests for application/messages.py."""

import pytest

from rootiface.application.messages import (
    MESSAGES,
    ROOT_INTERFACE_UNAVAILABLE,
    format_warning,
)


class TestFormatWarning:
    """Tests for format_warning()."""

    def test_root_interface_unavailable(self) -> None:
        message = format_warning(
            ROOT_INTERFACE_UNAVAILABLE,
            class_name="com.acme.BaseMapper",
            reason="not on classpath",
        )
        assert "com.acme.BaseMapper" in message
        assert "not on classpath" in message

    def test_unknown_key(self) -> None:
        with pytest.raises(KeyError):
            format_warning("no.such.key")

    def test_missing_placeholder(self) -> None:
        with pytest.raises(KeyError):
            format_warning(ROOT_INTERFACE_UNAVAILABLE, class_name="x")

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            MESSAGES["other"] = "text"  # type: ignore[index]

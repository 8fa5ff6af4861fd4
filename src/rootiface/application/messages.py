"""Warning message catalog.

Messages are keyed so a host application can map them to its own
translations. Only the default (English) text ships here.
"""

from __future__ import annotations

from types import MappingProxyType

ROOT_INTERFACE_UNAVAILABLE = "root_interface.unavailable"

MESSAGES = MappingProxyType(
    {
        ROOT_INTERFACE_UNAVAILABLE: (
            "Cannot obtain method information for root interface {class_name} ({reason}); "
            "methods it may already declare will be generated"
        ),
    }
)


def format_warning(key: str, **params: str) -> str:
    """Format catalog message.

    Args:
        key: Message key
        **params: Placeholder values

    Returns:
        Formatted message

    Raises:
        KeyError: If key is unknown or a placeholder is missing
    """
    return MESSAGES[key].format(**params)

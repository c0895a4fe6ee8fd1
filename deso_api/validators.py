"""Presence checks shared by the client operations."""

from __future__ import annotations

from typing import Any


def is_present(value: Any) -> bool:
    """Truthiness check: None, empty strings, 0 and empty containers are absent."""
    return bool(value)


def is_defined(value: Any) -> bool:
    """Presence check for boolean fields, where False is a real value."""
    return value is not None


def drop_absent(body: dict[str, Any]) -> dict[str, Any]:
    """Omit None-valued fields from a request body before it goes on the wire."""
    return {key: value for key, value in body.items() if value is not None}

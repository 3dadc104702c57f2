"""Test data factories for deterministic test data generation."""

from tests.factories.storage import (
    make_message_catalog,
    make_message_entry,
    make_message_item,
    make_plural_entry,
)

__all__ = [
    "make_message_catalog",
    "make_message_entry",
    "make_message_item",
    "make_plural_entry",
]

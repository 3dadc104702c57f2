"""Shared fixtures for gettext-cms tests."""

import pytest

from gettext_cms.storage import (
    InMemoryMessageRepository,
    MessageStorage,
    PluralRuleProvider,
)


class FixedPluralRuleProvider(PluralRuleProvider):
    """Plural rule provider returning counts from a dict, recording lookups."""

    def __init__(self, counts):
        self.counts = counts
        self.calls = []

    def categories_for(self, locale: str) -> int:
        self.calls.append(locale)
        return self.counts[locale]


@pytest.fixture
def repository():
    """Fresh in-memory message repository."""
    return InMemoryMessageRepository()


@pytest.fixture
def plural_rules():
    """Plural rules with lt = 3 forms and en = 2 forms."""
    return FixedPluralRuleProvider({"lt": 3, "en": 2})


@pytest.fixture
def storage(repository):
    """MessageStorage over the in-memory repository with Babel plural rules."""
    return MessageStorage(repository)

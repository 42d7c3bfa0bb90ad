"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest

from zibra.core.domain import Corpus, HelpArticle, ResponseTemplate, SynonymTable

PACKAGED_RESOURCES = Path(__file__).parent.parent / "zibra" / "resources"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI and HTTP over the packaged corpus)"
    )


@pytest.fixture
def template_corpus():
    """Small role-scoped template corpus with one catch-all."""
    return Corpus(
        [
            ResponseTemplate(
                id="r-wallet",
                scope="rider",
                category="wallet",
                keywords=["wallet", "top up"],
                content="Open Wallet and tap Top Up.",
            ),
            ResponseTemplate(
                id="d-payout",
                scope="driver",
                category="earnings",
                keywords=["payout", "wallet"],
                content="Payouts are processed weekly.",
            ),
            ResponseTemplate(
                id="x-thanks",
                scope=["rider", "driver", "general"],
                category="conversation",
                keywords=["thank", "thanks"],
                content="You're welcome!",
                priority=80,
            ),
            ResponseTemplate(
                id="x-help",
                scope="general",
                category="general",
                keywords=[],
                content="How can I help you today?",
                priority=0,
            ),
        ]
    )


@pytest.fixture
def synonyms():
    """Synonym table with a reverse-lookup entry."""
    return SynonymTable(
        {
            "pay": ["wallet", "cash"],
            "money": ["payment", "wallet", "earnings"],
            "trip": ["ride", "journey"],
        }
    )


@pytest.fixture
def help_articles():
    """Help articles in declaration order."""
    return Corpus(
        [
            HelpArticle(
                id="a-start",
                category="getting-started",
                title="Getting started",
                summary="Set up your account",
                body="Download the app and register.",
                keywords=["start", "register"],
            ),
            HelpArticle(
                id="a-wallet",
                category="payments",
                title="How do I add money to my wallet?",
                summary="Top up using a card or bank transfer",
                body="Open Wallet, choose Add Money and pick a payment method.",
                keywords=["add", "fund", "wallet", "money"],
            ),
            HelpArticle(
                id="a-ride",
                category="trips",
                title="Requesting a ride",
                summary="Book a ride in a few taps",
                body="Enter your destination and confirm the pickup point.",
                keywords=["ride", "book"],
            ),
            HelpArticle(
                id="a-rating",
                category="trips",
                title="Rating your driver",
                summary="Leave feedback after every trip",
                body="Tap the stars at the end of the journey.",
                keywords=["rating", "stars"],
            ),
        ]
    )


@pytest.fixture
def make_corpus_dir(tmp_path):
    """Factory writing a corpus directory; packaged files fill any part not given."""

    def _make(templates=None, help_file=None, synonyms=None) -> Path:
        parts = {
            "templates.json": templates,
            "driver_help.json": help_file,
            "synonyms.json": synonyms,
        }
        for name, content in parts.items():
            if content is None:
                text = (PACKAGED_RESOURCES / name).read_text(encoding="utf-8")
            elif isinstance(content, str):
                text = content
            else:
                text = json.dumps(content)
            (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def corpus_dir(make_corpus_dir):
    """A corpus directory with small, valid files."""
    return make_corpus_dir(
        templates=[
            {
                "id": "r-wallet",
                "role": "rider",
                "category": "wallet",
                "keywords": ["Wallet", "top up"],
                "response": "Open Wallet and tap Top Up.",
            },
            {
                "id": "x-help",
                "role": ["rider", "driver", "general"],
                "category": "general",
                "keywords": [],
                "response": "How can I help you today?",
                "priority": 0,
            },
        ],
        help_file={
            "categories": [{"id": "payments", "name": "Payments", "icon": "wallet"}],
            "articles": [
                {
                    "id": "pe-1",
                    "categoryId": "payments",
                    "title": "Adding money",
                    "summary": "Top up your wallet",
                    "content": "Use a card.",
                    "keywords": ["wallet", "money"],
                }
            ],
        },
        synonyms={"Pay": ["Wallet", "cash"]},
    )

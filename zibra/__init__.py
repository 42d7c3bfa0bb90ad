"""ZIBA support assistant matching engine.

Selects pre-authored support responses for a user's role and ranks help
articles against free-text queries.
"""

__version__ = "1.0.0"

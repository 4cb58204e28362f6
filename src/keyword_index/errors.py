"""
Error types for the keyword index.

Only malformed input is an error. An empty corpus or a query without
searchable terms is a normal outcome and yields an empty result list.
"""

from typing import Optional


class KeywordIndexError(Exception):
    """Base class for keyword index errors"""


class MalformedInputError(KeywordIndexError, ValueError):
    """Document batch or query is not text; the whole operation is rejected"""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position  # Offending entry in the batch, if known

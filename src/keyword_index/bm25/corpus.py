"""
Corpus store - ordered collection of document records plus their statistics.
"""

import logging
from collections.abc import Sequence
from typing import Callable, Iterable, List, Optional, Tuple

from ..errors import MalformedInputError
from .document import DocumentRecord
from .statistics import IndexStatistics
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def validate_documents(documents) -> List[str]:
    """
    Check a document batch before anything is stored.
    
    Args:
        documents: Sequence of document texts
    
    Returns:
        The batch as a list of strings
    
    Raises:
        MalformedInputError: batch is not a sequence, or any entry is not a str
    """
    if documents is None or isinstance(documents, (str, bytes)) or not isinstance(documents, Sequence):
        raise MalformedInputError(
            f"Documents must be a sequence of strings, got {type(documents).__name__}"
        )
    
    for position, text in enumerate(documents):
        if not isinstance(text, str):
            raise MalformedInputError(
                f"Document at position {position} is {type(text).__name__}, expected str",
                position=position,
            )
    
    return list(documents)


class CorpusStore:
    """
    Stores document records in insertion order and keeps statistics in sync.
    
    Every mutation validates the whole batch first (no partial insertion)
    and rebuilds the statistics before returning.
    """
    
    def __init__(self, tokenizer: Optional[Callable[[str], List[str]]] = None):
        self.tokenizer = tokenizer or tokenize
        self._documents: Tuple[DocumentRecord, ...] = ()
        self._statistics = IndexStatistics()
    
    @property
    def documents(self) -> Tuple[DocumentRecord, ...]:
        return self._documents
    
    @property
    def statistics(self) -> IndexStatistics:
        return self._statistics
    
    def __len__(self) -> int:
        return len(self._documents)
    
    def get(self, doc_id: int) -> DocumentRecord:
        """Look up a document by insertion position."""
        if doc_id < 0:
            raise IndexError(f"Invalid document id: {doc_id}")
        return self._documents[doc_id]
    
    def initialize(self, texts: Iterable[str]) -> None:
        """Replace all content with one record per text."""
        batch = validate_documents(texts)
        self._documents = self._build_records(batch, start=0)
        self._rebuild()
    
    def append(self, texts: Iterable[str]) -> None:
        """Add records after the existing ones; existing ids are unchanged."""
        batch = validate_documents(texts)
        self._documents = self._documents + self._build_records(batch, start=len(self._documents))
        self._rebuild()
    
    def copy(self) -> "CorpusStore":
        """Shallow copy sharing the immutable records."""
        clone = CorpusStore(tokenizer=self.tokenizer)
        clone._documents = self._documents
        clone._statistics = self._statistics
        return clone
    
    def _build_records(self, texts: List[str], start: int) -> Tuple[DocumentRecord, ...]:
        return tuple(
            DocumentRecord.from_text(start + offset, text, tokenizer=self.tokenizer)
            for offset, text in enumerate(texts)
        )
    
    def _rebuild(self) -> None:
        self._statistics = IndexStatistics.build(self._documents)

"""
Index statistics builder - aggregates corpus-level BM25 statistics.

Statistics are always rebuilt from scratch after a mutation (never patched
incrementally), so they cannot drift from the stored documents.
Rebuild cost is O(total stored tokens) per mutation batch; searches never
trigger a rebuild.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable

from .document import DocumentRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexStatistics:
    """
    Aggregate values derived from the corpus.
    
    Attributes:
        document_frequency: term -> number of documents containing the term
            (counted once per document, not per occurrence)
        average_document_length: mean token count, 0.0 for an empty corpus
        corpus_size: number of stored documents
    """
    document_frequency: Dict[str, int] = field(default_factory=dict)
    average_document_length: float = 0.0
    corpus_size: int = 0

    @classmethod
    def build(cls, documents: Iterable[DocumentRecord]) -> "IndexStatistics":
        """
        Compute document frequencies and average length in a single pass.
        
        Args:
            documents: Document records of the corpus
        
        Returns:
            IndexStatistics consistent with the given documents
        
        Example:
            >>> docs = [DocumentRecord.from_text(0, "apple banana"),
            ...         DocumentRecord.from_text(1, "banana banana")]
            >>> stats = IndexStatistics.build(docs)
            >>> stats.document_frequency
            {'apple': 1, 'banana': 2}
            >>> stats.average_document_length
            2.0
        """
        document_frequency = defaultdict(int)
        total_length = 0
        corpus_size = 0
        
        for doc in documents:
            corpus_size += 1
            total_length += doc.length
            for term in doc.term_frequency:
                document_frequency[term] += 1
        
        average_length = total_length / corpus_size if corpus_size > 0 else 0.0
        
        logger.debug(
            f"Rebuilt index statistics: {len(document_frequency)} unique terms, "
            f"{corpus_size} documents, avgdl={average_length:.2f}"
        )
        
        return cls(
            document_frequency=dict(document_frequency),
            average_document_length=average_length,
            corpus_size=corpus_size,
        )

    def df(self, term: str) -> int:
        """Document frequency of term (0 if unseen)"""
        return self.document_frequency.get(term, 0)

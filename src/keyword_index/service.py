"""
Retrieval service - local, in-memory BM25 keyword search.

Owns the corpus and its statistics as one immutable revision:
- initialize(documents): replace the corpus
- append(documents): add documents after the existing ones
- search(query, k): rank stored documents against a free-text query

Concurrency model:
    Mutations build a new CorpusStore revision under a lock and swap the
    reference. search() reads the reference once, so it always scores a
    corpus together with the statistics built from it, and never waits on
    a running mutation.

Recovered conditions (return [] instead of raising):
    - search before any documents were loaded
    - query without alphanumeric terms
    - corpus whose documents contain no terms at all
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .bm25.corpus import CorpusStore
from .bm25.scorer import BM25Scorer, DEFAULT_B, DEFAULT_K1, unique_terms, validate_parameters
from .bm25.statistics import IndexStatistics
from .bm25.tokenizer import tokenize
from .errors import MalformedInputError

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


@dataclass
class SearchResult:
    """Single ranked document"""
    text: str           # Original document text
    score: float        # BM25 score (always > 0)
    document_id: int    # Insertion position in the corpus

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "score": self.score}


class RetrievalService:
    """
    In-process keyword index with BM25 ranking.
    
    Each instance is an independent index; nothing is shared between
    instances and nothing outlives the process.
    """
    
    def __init__(self, k1: float = DEFAULT_K1, b: float = DEFAULT_B, tokenizer=None):
        """
        Args:
            k1: BM25 term frequency saturation (default: 1.5)
            b: BM25 length normalization (default: 0.75)
            tokenizer: Text -> tokens function (default: tokenize)
        
        Raises:
            ValueError: k1 or b outside their valid range (see validate_parameters)
        """
        validate_parameters(k1, b)
        self.k1 = k1
        self.b = b
        self.tokenizer = tokenizer or tokenize
        self._store: Optional[CorpusStore] = None  # None = uninitialized
        self._write_lock = threading.Lock()
    
    @classmethod
    def from_settings(cls, settings) -> "RetrievalService":
        """Create a service using BM25 parameters from Settings"""
        return cls(k1=settings.k1, b=settings.b)
    
    @property
    def is_initialized(self) -> bool:
        return self._store is not None
    
    @property
    def document_count(self) -> int:
        store = self._store
        return len(store) if store is not None else 0
    
    @property
    def statistics(self) -> IndexStatistics:
        store = self._store
        return store.statistics if store is not None else IndexStatistics()
    
    def initialize(self, documents: Iterable[str]) -> None:
        """
        Replace the whole corpus with the given documents.
        
        Documents without any alphanumeric content are stored but can never
        match a query.
        
        Raises:
            MalformedInputError: documents is not a sequence of strings.
                The previous corpus stays in place.
        """
        store = CorpusStore(tokenizer=self.tokenizer)
        store.initialize(documents)
        
        with self._write_lock:
            self._store = store
        
        logger.info(f"Local keyword index initialized with {len(store)} documents")
    
    def append(self, documents: Iterable[str]) -> None:
        """
        Add documents after the existing ones (ids of stored documents are unchanged).
        
        Appending to an uninitialized service initializes it.
        
        Raises:
            MalformedInputError: documents is not a sequence of strings.
                Nothing from the batch is stored.
        """
        with self._write_lock:
            current = self._store
            store = current.copy() if current is not None else CorpusStore(tokenizer=self.tokenizer)
            store.append(documents)
            added = len(store) - (len(current) if current is not None else 0)
            self._store = store
        
        logger.info(f"Added {added} documents to local keyword index (total: {len(store)})")
    
    def search(self, query: str, k: int = DEFAULT_TOP_K) -> List[SearchResult]:
        """
        Rank stored documents against a free-text query.
        
        Args:
            query: Free-text query
            k: Maximum number of results (positive integer)
        
        Returns:
            Up to k results sorted by descending score. Documents with equal
            scores keep insertion order. Documents scoring 0 are never returned.
        
        Raises:
            MalformedInputError: query is not a string
            ValueError: k is not a positive integer
        
        Example:
            >>> service = RetrievalService()
            >>> service.initialize(["Pinecone is a vector database.", "React is a UI library."])
            >>> [r.document_id for r in service.search("vector database")]
            [0]
        """
        if not isinstance(query, str):
            raise MalformedInputError(f"Query must be a string, got {type(query).__name__}")
        if isinstance(k, bool) or not isinstance(k, int) or k < 1:
            raise ValueError(f"k must be a positive integer, got {k!r}")
        
        store = self._store  # Single read: documents and statistics from one revision
        if store is None or len(store) == 0:
            logger.debug("Search on empty corpus, returning no results")
            return []
        
        query_terms = unique_terms(self.tokenizer(query))
        if not query_terms:
            logger.debug(f"Query has no searchable terms: {query!r}")
            return []
        
        statistics = store.statistics
        if statistics.average_document_length <= 0:
            logger.debug("Corpus contains no terms, returning no results")
            return []
        
        scorer = BM25Scorer(statistics, k1=self.k1, b=self.b)
        scored = []
        for doc in store.documents:
            score = scorer.score(query_terms, doc)
            if score > 0:
                scored.append(SearchResult(text=doc.text, score=score, document_id=doc.id))
        
        # sorted() is stable: equal scores stay in insertion order
        ranked = sorted(scored, key=lambda r: r.score, reverse=True)[:k]
        
        logger.debug(
            f"Search {query_terms} matched {len(scored)}/{len(store)} documents, "
            f"returning {len(ranked)}"
        )
        return ranked

"""
BM25 scorer with corpus-level IDF.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.

Formula:
    idf(t)      = ln(1 + (N - df(t) + 0.5) / (df(t) + 0.5))
    score(t, d) = idf(t) × (tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl))

Where:
    N = number of documents in the corpus
    df(t) = number of documents containing t
    tf = term frequency in document
    k1 = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    dl = document length (number of tokens)
    avgdl = average document length across the corpus

The "1 +" inside the logarithm keeps idf positive even for terms present
in more than half of the documents.

Query terms are deduplicated: a term repeated in the query counts once.
"""

import math
from typing import Iterable, List

from .document import DocumentRecord
from .statistics import IndexStatistics

DEFAULT_K1 = 1.5
DEFAULT_B = 0.75


def unique_terms(query_terms: Iterable[str]) -> List[str]:
    """Distinct query terms in first-seen order"""
    return list(dict.fromkeys(query_terms))


def validate_parameters(k1: float, b: float) -> None:
    """
    Check BM25 parameters before any scoring happens.
    
    Raises:
        ValueError: k1 is not a finite number >= 0, or b is not a finite number in [0, 1]
    """
    if isinstance(k1, bool) or not isinstance(k1, (int, float)) or not math.isfinite(k1) or k1 < 0:
        raise ValueError(f"k1 must be a finite number >= 0, got {k1!r}")
    if isinstance(b, bool) or not isinstance(b, (int, float)) or not math.isfinite(b) or not 0.0 <= b <= 1.0:
        raise ValueError(f"b must be a finite number between 0 and 1, got {b!r}")


class BM25Scorer:
    """
    BM25 scoring against a fixed set of index statistics.
    
    A scorer is bound to one statistics revision; build a new scorer after
    the corpus changes.
    """
    
    def __init__(self, statistics: IndexStatistics, k1: float = DEFAULT_K1, b: float = DEFAULT_B):
        """
        Initialize BM25 scorer.
        
        Args:
            statistics: Corpus statistics (N, df, avgdl)
            
            k1: Term frequency saturation parameter
                Higher = more weight to term frequency
                Default: 1.5
                
            b: Length normalization parameter
                Higher = more penalty for long documents
                Range: 0.0 - 1.0
                Default: 0.75
        """
        validate_parameters(k1, b)
        self.statistics = statistics
        self.k1 = k1
        self.b = b
    
    def idf(self, term: str) -> float:
        """Inverse document frequency; df=0 gives the largest (still finite) value."""
        n = self.statistics.corpus_size
        df = self.statistics.df(term)
        return math.log(1.0 + (n - df + 0.5) / (df + 0.5))
    
    def _length_norm(self, doc: DocumentRecord) -> float:
        """Length normalization factor: 1 - b + b * dl/avgdl"""
        return 1.0 - self.b + self.b * doc.length / self.statistics.average_document_length
    
    def score_term(self, term: str, doc: DocumentRecord) -> float:
        """BM25 contribution of a single term to a document"""
        tf = doc.term_frequency.get(term, 0)
        if tf == 0 or self.statistics.average_document_length <= 0:
            return 0.0
        
        numerator = tf * (self.k1 + 1.0)
        denominator = tf + self.k1 * self._length_norm(doc)
        return self.idf(term) * numerator / denominator
    
    def score(self, query_terms: Iterable[str], doc: DocumentRecord) -> float:
        """
        Compute BM25 score for a document given query terms.
        
        Args:
            query_terms: Tokenized query (lowercase); duplicates are ignored
            doc: Document record to score
        
        Returns:
            BM25 score (0.0 when no query term occurs in the document)
            
        Example:
            >>> docs = [DocumentRecord.from_text(i, t) for i, t in enumerate(
            ...     ["vector database", "ui library", "llm framework"])]
            >>> scorer = BM25Scorer(IndexStatistics.build(docs))
            >>> scorer.score(["vector", "vector"], docs[0]) == scorer.score(["vector"], docs[0])
            True
        """
        if not doc.term_frequency:
            return 0.0
        
        return sum(self.score_term(term, doc) for term in unique_terms(query_terms))

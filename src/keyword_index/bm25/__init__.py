"""
BM25 (Best Match 25) lexical retrieval for the local keyword index.

Components:
- tokenizer: Lowercase alphanumeric tokenization
- document: Per-document tokens and term frequencies
- statistics: Corpus-level document frequency and average length
- corpus: Ordered document store with full statistics rebuild on mutation
- scorer: BM25 scoring with corpus IDF (k1=1.5, b=0.75)
"""

from .tokenizer import tokenize
from .document import DocumentRecord
from .statistics import IndexStatistics
from .corpus import CorpusStore, validate_documents
from .scorer import BM25Scorer, DEFAULT_B, DEFAULT_K1

__all__ = [
    "tokenize",
    "DocumentRecord",
    "IndexStatistics",
    "CorpusStore",
    "validate_documents",
    "BM25Scorer",
    "DEFAULT_K1",
    "DEFAULT_B",
]

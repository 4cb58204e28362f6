"""
Keyword Index - in-process BM25 retrieval for RAG chat.

Ranks stored text passages against a free-text query without calling an
external embedding service. Everything lives in memory.

Usage:
    from keyword_index import RetrievalService
    
    service = RetrievalService()
    service.initialize(["Pinecone is a vector database.", "React is a UI library."])
    results = service.search("vector database", k=5)
"""

from .errors import KeywordIndexError, MalformedInputError
from .bm25 import BM25Scorer, CorpusStore, DocumentRecord, IndexStatistics, tokenize
from .service import RetrievalService, SearchResult
from .config import Settings, load_env
from .logging_config import setup_logging
from .tool import KeywordSearchTool, SearchToolInput, load_documents

__version__ = "0.1.0"

__all__ = [
    "KeywordIndexError",
    "MalformedInputError",
    "BM25Scorer",
    "CorpusStore",
    "DocumentRecord",
    "IndexStatistics",
    "tokenize",
    "RetrievalService",
    "SearchResult",
    "Settings",
    "load_env",
    "setup_logging",
    "KeywordSearchTool",
    "SearchToolInput",
    "load_documents",
]

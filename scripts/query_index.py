#!/usr/bin/env python3
"""
Populate a local keyword index and run a query against it.

Without --docs the index is filled with a small built-in knowledge set;
with --docs every *.txt / *.md file in the directory becomes one document.

Usage:
    python scripts/query_index.py "vector database"
    python scripts/query_index.py "deployment strategies" --docs tests/fixtures/documents --top-k 3
"""

import argparse
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from keyword_index import RetrievalService, Settings, load_documents, load_env, setup_logging

logger = logging.getLogger("query_index")

SAMPLE_DOCUMENTS = [
    "Gemini 2.5 Flash is Google's fastest and most efficient multimodal AI model, offering excellent performance for its size.",
    "LangChain is a framework for developing applications powered by language models, providing tools for chains, agents, and memory.",
    "LlamaIndex is a data framework for LLM applications to ingest, structure, and access private or domain-specific data.",
    "Pinecone is a vector database that makes it easy to build high-performance vector search applications.",
    "React is a JavaScript library for building user interfaces, maintained by Facebook and a community of developers.",
    "Vite is a build tool that provides a fast development environment for modern web projects.",
    "RAG (Retrieval Augmented Generation) enhances LLM responses by retrieving relevant information from external knowledge sources.",
    "Google's Gemini models support multimodal inputs including text, images, audio, and video.",
]


def read_documents(docs_dir: Path) -> list:
    """Read every .txt/.md file in docs_dir (sorted by name) as one document."""
    paths = sorted(p for p in docs_dir.iterdir() if p.suffix.lower() in {".txt", ".md"})
    return [p.read_text(encoding="utf-8", errors="replace") for p in paths]


def print_results(results) -> None:
    print("\nSearch Results:")
    print("=" * 80)
    
    if not results:
        print("No matching documents.")
    else:
        for rank, result in enumerate(results, start=1):
            preview = " ".join(result.text.split())[:60]
            print(f"{rank:>3} | doc {result.document_id:<4} | {result.score:8.4f} | {preview}")
    
    print("=" * 80)


def main() -> int:
    parser = argparse.ArgumentParser(description="Query a local BM25 keyword index")
    parser.add_argument("query", help="Free-text search query")
    parser.add_argument("--top-k", type=int, default=None, help="Maximum number of results (default: KEYWORD_INDEX_TOP_K or 5)")
    parser.add_argument("--docs", type=Path, default=None, help="Directory with .txt/.md documents")
    args = parser.parse_args()
    
    load_env(project_root)
    settings = Settings.from_env()
    setup_logging(log_file=settings.log_file, console_level=settings.console_level)
    
    if args.docs is not None:
        if not args.docs.is_dir():
            logger.error(f"Not a directory: {args.docs}")
            return 1
        documents = read_documents(args.docs)
    else:
        documents = SAMPLE_DOCUMENTS
    
    service = RetrievalService.from_settings(settings)
    if not load_documents(service, documents):
        return 1
    
    top_k = args.top_k if args.top_k is not None else settings.top_k
    if top_k < 1:
        logger.error(f"--top-k must be >= 1, got {top_k}")
        return 1
    
    print_results(service.search(args.query, top_k))
    return 0


if __name__ == "__main__":
    sys.exit(main())

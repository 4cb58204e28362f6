"""Unit test fixtures - small in-memory corpora"""

import logging

import pytest

from keyword_index import RetrievalService


TECH_DOCUMENTS = [
    "Pinecone is a vector database.",
    "React is a UI library.",
    "LangChain is a framework.",
]

FRUIT_DOCUMENTS = [
    "apple banana",
    "banana cherry",
    "apple cherry",
]


@pytest.fixture
def tech_documents():
    return list(TECH_DOCUMENTS)


@pytest.fixture
def fruit_documents():
    return list(FRUIT_DOCUMENTS)


@pytest.fixture
def service():
    """Fresh, uninitialized index"""
    return RetrievalService()


@pytest.fixture
def tech_service():
    """Index with three short technology descriptions"""
    svc = RetrievalService()
    svc.initialize(TECH_DOCUMENTS)
    return svc


@pytest.fixture
def fruit_service():
    """Index where every term appears in exactly two documents"""
    svc = RetrievalService()
    svc.initialize(FRUIT_DOCUMENTS)
    return svc


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger after the test"""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    
    yield root_logger
    
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)

"""
Search tool exposed to the chat agent.

The agent calls the tool with a query and receives the matching document
texts joined by blank lines, ready to be pasted into the prompt context.
Document loading goes through load_documents(), which reports success or
failure as a bool and logs the reason.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, Field

from .errors import MalformedInputError
from .service import DEFAULT_TOP_K, RetrievalService

logger = logging.getLogger(__name__)

TOOL_NAME = "vectordb"
TOOL_DESCRIPTION = (
    "Searches saved documents for relevant information. "
    "Use this tool only if the user's question likely depends on stored knowledge. "
    "If you already know the answer, do not call this tool."
)


class SearchToolInput(BaseModel):
    query: str = Field(..., description="The search query string.")
    top_k: int = Field(DEFAULT_TOP_K, ge=1, description="Maximum number of documents to return")


class KeywordSearchTool:
    """Agent tool wrapping RetrievalService.search()"""
    
    name = TOOL_NAME
    description = TOOL_DESCRIPTION
    args_schema = SearchToolInput
    
    def __init__(self, service: RetrievalService, top_k: int = DEFAULT_TOP_K):
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")
        self.service = service
        self.top_k = top_k
    
    def run(self, query: str, top_k: Optional[int] = None) -> str:
        """
        Search and format results for the agent.
        
        Returns:
            Matching texts separated by a blank line ("" when nothing matches)
        """
        results = self.service.search(query, self.top_k if top_k is None else top_k)
        logger.debug(f"Tool '{self.name}' returned {len(results)} documents for query {query!r}")
        return "\n\n".join(result.text for result in results)
    
    def invoke(self, payload: Dict[str, Any]) -> str:
        """
        Validate a raw tool-call payload and run the search.
        
        Raises:
            pydantic.ValidationError: payload does not match SearchToolInput
        """
        if "top_k" not in payload:
            payload = {**payload, "top_k": self.top_k}
        args = self.args_schema.model_validate(payload)
        return self.run(args.query, args.top_k)


def load_documents(service: RetrievalService, documents: Iterable[str], append: bool = False) -> bool:
    """
    Load documents into the index and report the outcome.
    
    Args:
        service: Target index
        documents: Document texts
        append: Add to the existing corpus instead of replacing it
    
    Returns:
        True on success, False if the batch was rejected (nothing stored)
    """
    try:
        if append:
            service.append(documents)
        else:
            service.initialize(documents)
    except MalformedInputError as e:
        operation = "append to" if append else "initialize"
        logger.error(f"Failed to {operation} local keyword index: {e}")
        return False
    return True

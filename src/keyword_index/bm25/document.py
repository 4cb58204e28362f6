"""
Document record - the tokenized form of one stored text.
"""

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, List, Mapping, Tuple

from .tokenizer import tokenize


@dataclass(frozen=True)
class DocumentRecord:
    """
    One stored text plus its token statistics.
    
    The id is the insertion position in the corpus (0-based) and is stable
    as long as documents are only appended.
    """
    id: int
    text: str
    tokens: Tuple[str, ...]
    term_frequency: Mapping[str, int] = field(compare=False)  # Read-only view

    @property
    def length(self) -> int:
        """Document length in tokens"""
        return len(self.tokens)

    @classmethod
    def from_text(
        cls,
        doc_id: int,
        text: str,
        tokenizer: Callable[[str], List[str]] = tokenize
    ) -> "DocumentRecord":
        """
        Tokenize text and count term occurrences.
        
        Args:
            doc_id: Insertion position in the corpus
            text: Raw document text (kept untouched)
            tokenizer: Function mapping text to a token list
        
        Returns:
            DocumentRecord whose term_frequency keys are exactly the
            distinct tokens and whose counts sum to len(tokens)
        """
        tokens = tuple(tokenizer(text))
        return cls(
            id=doc_id,
            text=text,
            tokens=tokens,
            term_frequency=MappingProxyType(dict(Counter(tokens))),
        )

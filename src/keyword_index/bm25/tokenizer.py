"""
Tokenizer for BM25 text processing.

Tokenization pipeline:
1. Lowercase conversion
2. Split on every run of characters outside [a-z0-9]
3. Drop empty pieces

No stopwords, no stemming: every alphanumeric run is a term.
Non-ASCII characters fall outside the accepted class and act as separators
("café" → ["caf"]).
"""

import re
from typing import List

_SPLIT_PATTERN = re.compile(r"[^a-z0-9]+")


def tokenize(text: str) -> List[str]:
    """
    Tokenize text into lowercase alphanumeric terms.
    
    Args:
        text: Input text to tokenize
        
    Returns:
        List of lowercase tokens in original order (duplicates kept)
        
    Examples:
        >>> tokenize("Pinecone is a vector database.")
        ['pinecone', 'is', 'a', 'vector', 'database']
        
        >>> tokenize("user@example.com v2.5")
        ['user', 'example', 'com', 'v2', '5']
        
        >>> tokenize("!!! ---")
        []
    """
    if not text:
        return []
    
    return [t for t in _SPLIT_PATTERN.split(text.lower()) if t]


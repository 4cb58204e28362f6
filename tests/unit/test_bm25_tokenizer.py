"""
Unit tests for BM25 tokenizer.
"""

from keyword_index.bm25.tokenizer import tokenize


class TestTokenizer:
    """Test lowercase alphanumeric tokenization"""
    
    def test_basic_tokenization(self):
        """Test words split on whitespace and punctuation"""
        assert tokenize("Pinecone is a vector database.") == [
            "pinecone", "is", "a", "vector", "database"
        ]
    
    def test_lowercase_conversion(self):
        """Test that all tokens are lowercased"""
        assert tokenize("PostgreSQL Cloud SQL") == ["postgresql", "cloud", "sql"]
    
    def test_no_stopword_removal(self):
        """Test that common words are kept"""
        tokens = tokenize("the index is on the disk")
        assert tokens.count("the") == 2
        assert "is" in tokens
    
    def test_no_stemming(self):
        """Test that words keep their surface form"""
        assert tokenize("deployment strategies") == ["deployment", "strategies"]
    
    def test_hyphens_and_underscores_split(self):
        """Test that anything outside [a-z0-9] is a separator"""
        assert tokenize("blue-green file_name.txt") == ["blue", "green", "file", "name", "txt"]
    
    def test_numbers_kept(self):
        """Test that digits are part of the accepted class"""
        assert tokenize("Python 3.11 and bm25") == ["python", "3", "11", "and", "bm25"]
    
    def test_empty_string(self):
        """Test empty and whitespace-only input returns empty list"""
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize("\n\t") == []
    
    def test_punctuation_only(self):
        """Test all-punctuation input returns empty list"""
        assert tokenize("!!! --- ???") == []
    
    def test_non_ascii_is_separator(self):
        """Test that non-ASCII characters split tokens"""
        assert tokenize("café naïve") == ["caf", "na", "ve"]
        assert tokenize("日本語") == []
    
    def test_duplicates_preserved_in_order(self):
        """Test that repeated words are all returned in order"""
        assert tokenize("b a b") == ["b", "a", "b"]

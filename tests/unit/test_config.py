"""
Unit tests for environment configuration.
"""

import logging

import pytest

from keyword_index.config import Settings, load_env


class TestSettings:
    """Test Settings.from_env()"""
    
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.top_k == 5
        assert settings.k1 == 1.5
        assert settings.b == 0.75
        assert settings.log_level == "INFO"
        assert settings.log_file == "logs/keyword-index.log"
    
    def test_overrides(self):
        settings = Settings.from_env({
            "KEYWORD_INDEX_TOP_K": "3",
            "KEYWORD_INDEX_K1": "1.2",
            "KEYWORD_INDEX_B": "0.5",
            "LOG_LEVEL": "debug",
            "LOG_FILE": "/tmp/index.log",
        })
        assert settings.top_k == 3
        assert settings.k1 == pytest.approx(1.2)
        assert settings.b == pytest.approx(0.5)
        assert settings.log_level == "DEBUG"
        assert settings.console_level == logging.DEBUG
        assert settings.log_file == "/tmp/index.log"
    
    def test_empty_values_use_defaults(self):
        settings = Settings.from_env({"KEYWORD_INDEX_TOP_K": "", "LOG_FILE": ""})
        assert settings.top_k == 5
        assert settings.log_file == "logs/keyword-index.log"
    
    def test_unknown_log_level_falls_back_to_info(self):
        assert Settings.from_env({"LOG_LEVEL": "verbose"}).console_level == logging.INFO
    
    @pytest.mark.parametrize("name,value", [
        ("KEYWORD_INDEX_TOP_K", "five"),
        ("KEYWORD_INDEX_TOP_K", "0"),
        ("KEYWORD_INDEX_K1", "abc"),
        ("KEYWORD_INDEX_K1", "-1"),
        ("KEYWORD_INDEX_B", "1.5"),
        ("KEYWORD_INDEX_K1", "nan"),
        ("KEYWORD_INDEX_K1", "inf"),
        ("KEYWORD_INDEX_B", "nan"),
        ("KEYWORD_INDEX_B", "-inf"),
    ])
    def test_invalid_values_name_variable(self, name, value):
        with pytest.raises(ValueError, match=name):
            Settings.from_env({name: value})
    
    def test_non_finite_k1_never_reaches_search(self):
        """Test nan in the environment fails loudly instead of matching nothing"""
        with pytest.raises(ValueError, match="KEYWORD_INDEX_K1 must be a finite number"):
            Settings.from_env({"KEYWORD_INDEX_K1": "nan"})
    
    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("KEYWORD_INDEX_TOP_K", "9")
        assert Settings.from_env().top_k == 9


class TestLoadEnv:
    """Test .env.local / .env discovery"""
    
    def test_env_local_preferred(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("KEYWORD_INDEX_TOP_K", "placeholder")
        (tmp_path / ".env.local").write_text("KEYWORD_INDEX_TOP_K=7\n")
        (tmp_path / ".env").write_text("KEYWORD_INDEX_TOP_K=8\n")
        
        assert load_env(tmp_path) == tmp_path / ".env.local"
        assert Settings.from_env().top_k == 7
        assert f"Loading environment from: {tmp_path / '.env.local'}" in capsys.readouterr().out
    
    def test_env_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KEYWORD_INDEX_TOP_K", "placeholder")
        (tmp_path / ".env").write_text("KEYWORD_INDEX_TOP_K=8\n")
        
        assert load_env(tmp_path) == tmp_path / ".env"
        assert Settings.from_env().top_k == 8
    
    def test_no_env_file(self, tmp_path, capsys):
        """Test the warning is printed (logging is not configured yet)"""
        assert load_env(tmp_path) is None
        assert "WARNING: No .env.local or .env file found" in capsys.readouterr().out

"""
Configuration from environment variables.

Variables (all optional):
    KEYWORD_INDEX_TOP_K: Default number of search results (default: 5)
    KEYWORD_INDEX_K1: BM25 term frequency saturation (default: 1.5)
    KEYWORD_INDEX_B: BM25 length normalization, 0.0 - 1.0 (default: 0.75)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base path of the rotating log file (default: logs/keyword-index.log)

Values are read from the process environment after load_env() has merged
.env.local (local dev) or .env into it.
"""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .bm25.scorer import DEFAULT_B, DEFAULT_K1

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.
    
    Runs before setup_logging(), so progress goes to stdout via print().
    
    Returns:
        Path of the loaded file, or None when only the system environment is used
    """
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"
    
    for candidate in (env_local, env_file):
        if candidate.exists():
            print(f"Loading environment from: {candidate}")
            load_dotenv(candidate, override=True)
            return candidate
    
    print("WARNING: No .env.local or .env file found - using system environment variables only")
    return None


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the keyword index"""
    top_k: int = 5
    k1: float = DEFAULT_K1
    b: float = DEFAULT_B
    log_level: str = "INFO"
    log_file: str = "logs/keyword-index.log"

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.
        
        Args:
            env: Mapping to read from (default: os.environ)
        
        Raises:
            ValueError: A variable is present but invalid (message names it)
        """
        if env is None:
            env = os.environ
        
        top_k = _get_int(env, "KEYWORD_INDEX_TOP_K", 5)
        if top_k < 1:
            raise ValueError(f"KEYWORD_INDEX_TOP_K must be >= 1, got {top_k}")
        
        k1 = _get_float(env, "KEYWORD_INDEX_K1", DEFAULT_K1)
        if k1 < 0:
            raise ValueError(f"KEYWORD_INDEX_K1 must be >= 0, got {k1}")
        
        b = _get_float(env, "KEYWORD_INDEX_B", DEFAULT_B)
        if not 0.0 <= b <= 1.0:
            raise ValueError(f"KEYWORD_INDEX_B must be between 0 and 1, got {b}")
        
        return cls(
            top_k=top_k,
            k1=k1,
            b=b,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_file=env.get("LOG_FILE") or "logs/keyword-index.log",
        )

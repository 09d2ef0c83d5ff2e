"""
fuzler package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .boundary import SimilarityWorker, safe_similarity_score
from .config import FuzlerConfig, config_from_dict, config_from_yaml, load_config
from .metrics import blend_similarity, char_similarity, token_multiset_similarity
from .ranking import top_matches
from .scoring import similarity_score

__all__ = [
    "FuzlerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "similarity_score",
    "safe_similarity_score",
    "SimilarityWorker",
    "top_matches",
    "blend_similarity",
    "char_similarity",
    "token_multiset_similarity",
]

__version__ = "0.1.2"

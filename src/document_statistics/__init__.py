"""
document_statistics computes live word, sentence and readability metrics for
incrementally edited documents.
"""

from __future__ import annotations

from .boundaries import SentenceBoundaryFinder, create_boundary_finder
from .config import StatisticsConfig, config_from_dict, config_from_yaml, load_config
from .document import Paragraph, PlainTextDocument, TextDocument
from .engine import DocumentStatistics
from .models import MetricsSnapshot, ParagraphStatistics, StatisticsScope, WordCounts
from .sentences import count_sentences
from .tokenization import count_words

__all__ = [
    "StatisticsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "SentenceBoundaryFinder",
    "create_boundary_finder",
    "Paragraph",
    "PlainTextDocument",
    "TextDocument",
    "DocumentStatistics",
    "MetricsSnapshot",
    "ParagraphStatistics",
    "StatisticsScope",
    "WordCounts",
    "count_sentences",
    "count_words",
]

__version__ = "0.1.0"

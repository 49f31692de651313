"""
SEO scorer package.
Provides signal extraction, per-signal scoring and report assembly.
"""

from .document import PageDocument
from .engine import ScoringEngine, analyze
from .extractor import SignalExtractor
from .scorers import SCORERS, MAX_POINTS
from .signals import (
    SignalResult,
    ImageStats,
    StructuredDataStats,
    ExtractedSignals,
    AnalysisReport,
    SIGNAL_NAMES,
)

__all__ = [
    'PageDocument',
    'ScoringEngine',
    'analyze',
    'SignalExtractor',
    'SCORERS',
    'MAX_POINTS',
    'SignalResult',
    'ImageStats',
    'StructuredDataStats',
    'ExtractedSignals',
    'AnalysisReport',
    'SIGNAL_NAMES',
]

"""
Analysis module - Lightweight morphology for writing feedback

This module provides:
- Stemmer: ordered suffix stripping
- tokenize(): lazy, restartable, locale-aware word tokens
- analyze(): stopword filtering and per-stem frequency counts
- suggest(): synonym lookup for overused words
- analyze_sentences(): sentence length classification
- Word banks and the sentence starter picker
"""

from .frequency import FrequencyReport, StemStats, analyze
from .sentences import LengthThresholds, SentenceLength, SentenceReport, analyze_sentences
from .starters import StarterPicker
from .stemmer import Stemmer, identity_stem
from .synonyms import build_synonym_table, suggest
from .tokenizer import Token, TokenStream, tokenize
from .wordbank import WordBank, load_word_bank

__all__ = [
    'FrequencyReport', 'StemStats', 'analyze',
    'LengthThresholds', 'SentenceLength', 'SentenceReport', 'analyze_sentences',
    'StarterPicker',
    'Stemmer', 'identity_stem',
    'build_synonym_table', 'suggest',
    'Token', 'TokenStream', 'tokenize',
    'WordBank', 'load_word_bank',
]

"""Data models for the vocabulary flashcard application"""

from .vocab_entry import Locale, VocabEntry, VocabList

__all__ = [
    "Locale",
    "VocabEntry",
    "VocabList",
]

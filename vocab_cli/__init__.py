"""
Vocab CLI - personal bilingual vocabulary flashcards in the terminal
"""

__version__ = "1.0.0"
__description__ = "Bilingual (English/Vietnamese) vocabulary flashcard manager"

from .core.factory import create_vocabulary_service

__all__ = ["create_vocabulary_service"]

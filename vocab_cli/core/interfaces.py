"""Interface definitions for core components"""

from abc import ABC, abstractmethod

from ..models.vocab_entry import VocabEntry


class VocabStorageInterface(ABC):
    """Interface for vocabulary persistence"""

    @abstractmethod
    def load(self) -> list[VocabEntry]:
        """Load the full vocabulary list; never raises on missing data"""
        pass

    @abstractmethod
    def save(self, entries: list[VocabEntry]) -> None:
        """Overwrite the stored vocabulary with the given list"""
        pass

"""Pydantic models for stored vocabulary entries"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Locale(str, Enum):
    """Supported display locales"""

    EN = "en"
    VI = "vi"

    @classmethod
    def codes(cls) -> list[str]:
        """All locale codes, in declaration order"""
        return [member.value for member in cls]


class VocabEntry(BaseModel):
    """A single word with its English and Vietnamese meanings"""

    # Unknown keys found on disk are kept so a save does not drop them
    model_config = ConfigDict(extra="allow")

    word: str = Field(description="Lookup key, matched case-insensitively")
    vi: str = Field(description="Vietnamese meaning")
    en: str = Field(description="English meaning")

    def meaning(self, locale: Locale | str) -> str:
        """Meaning shown and quizzed for the given locale"""
        return self.vi if Locale(locale) is Locale.VI else self.en

    def matches(self, word: str) -> bool:
        """Case-insensitive comparison against the lookup key"""
        return self.word.lower() == word.lower()


VocabList = list[VocabEntry]

"""Vocabulary operations: add, list, quiz and delete"""

import random
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from ..exceptions import MissingInputError
from ..logging_config import get_logger
from ..models.vocab_entry import Locale, VocabEntry
from .interfaces import VocabStorageInterface
from .messages import get_messages, render, resolve_locale

logger = get_logger(__name__)

# Output styles
POSITIVE = "green"
WARNING = "yellow"
INFO = "blue"
NEGATIVE = "red"


@dataclass
class QuizResult:
    """Result of a single quiz round"""

    entry: VocabEntry
    answer: str
    expected: str
    correct: bool


class VocabularyService:
    """Runs vocabulary operations against an injected storage backend.

    Every operation loads the full list, works on it in memory and, for
    add/delete, writes the whole list back before printing its result.
    """

    def __init__(
        self,
        storage: VocabStorageInterface,
        console: Console | None = None,
        prompt: Callable[[str], str] | None = None,
        rng: random.Random | None = None,
    ):
        self.storage = storage
        self.console = console or Console()
        self._prompt = prompt or self._console_prompt
        self._rng = rng or random.Random()

    def add_word(self, word: str, vi: str, en: str) -> VocabEntry:
        """Append a new entry; duplicates are allowed"""
        missing = [
            name
            for name, value in (("word", word), ("vi", vi), ("en", en))
            if not value
        ]
        if missing:
            raise MissingInputError(missing)

        entries = self.storage.load()
        entry = VocabEntry(word=word, vi=vi, en=en)
        entries.append(entry)
        self.storage.save(entries)
        logger.debug(f"Added '{word}' ({len(entries)} entries stored)")

        # The add confirmation is always shown in English
        self._say(get_messages(Locale.EN).add_success, POSITIVE)
        return entry

    def list_words(self, locale: Locale | str = Locale.EN) -> list[VocabEntry]:
        """Print all entries with their meaning in the given locale"""
        locale = resolve_locale(locale)
        messages = get_messages(locale)
        entries = self.storage.load()
        if not entries:
            self._say(messages.no_words, WARNING)
            return entries

        self._say(messages.list_title, INFO)
        for index, entry in enumerate(entries, 1):
            self._say(f"{index}. {entry.word} - {entry.meaning(locale)}")
        return entries

    def quiz(self, locale: Locale | str = Locale.EN) -> QuizResult | None:
        """Ask for the meaning of one randomly chosen word"""
        locale = resolve_locale(locale)
        messages = get_messages(locale)
        entries = self.storage.load()
        if not entries:
            self._say(messages.no_words, WARNING)
            return None

        entry = self._rng.choice(entries)
        answer = self._prompt(render(messages.quiz_prompt, word=entry.word))
        expected = entry.meaning(locale)
        correct = answer.lower() == expected.lower()
        logger.debug(f"Quiz on '{entry.word}': answer={answer!r} correct={correct}")

        if correct:
            self._say(messages.quiz_correct, POSITIVE)
        else:
            self._say(render(messages.quiz_wrong, meaning=expected), NEGATIVE)
        return QuizResult(entry=entry, answer=answer, expected=expected, correct=correct)

    def delete_word(self, word: str, locale: Locale | str = Locale.EN) -> int:
        """Remove every entry matching word; returns how many were removed"""
        locale = resolve_locale(locale)
        messages = get_messages(locale)
        entries = self.storage.load()
        kept = [entry for entry in entries if not entry.matches(word)]
        removed = len(entries) - len(kept)
        if removed == 0:
            self._say(messages.no_word_found, WARNING)
            return 0

        self.storage.save(kept)
        logger.debug(f"Deleted {removed} entries matching '{word}'")
        self._say(render(messages.delete_success, word=word), POSITIVE)
        return removed

    def _say(self, message: str, style: str | None = None) -> None:
        self.console.print(
            message,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def _console_prompt(self, message: str) -> str:
        return self.console.input(Text(f"? {message} ", style="bold"))

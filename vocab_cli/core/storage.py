"""Vocabulary storage backends.

The whole vocabulary lives in a single JSON array. Reading is lenient: a
missing, unreadable or non-array file loads as an empty vocabulary through
the explicit ``LoadResult.empty`` path. Array items that are not valid
entries are skipped on load and written back untouched on the next save.
Writing is strict and raises ``StorageError`` on any I/O failure.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import StorageError
from ..logging_config import get_logger
from ..models.vocab_entry import VocabEntry
from .interfaces import VocabStorageInterface

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """Outcome of reading the vocabulary file"""

    entries: list[VocabEntry] = field(default_factory=list)
    fell_back: bool = False
    reason: str | None = None
    # Raw array items that did not validate as entries, in file order
    skipped: list[Any] = field(default_factory=list)

    @classmethod
    def empty(cls, reason: str) -> "LoadResult":
        """Fallback result used when stored data cannot be used"""
        return cls(entries=[], fell_back=True, reason=reason)


def dump_entries(entries: list[VocabEntry], preserved: list[Any] | None = None) -> str:
    """Serialize entries as indented JSON with word, vi, en first.

    Preserved raw items are appended after the entries unchanged.
    """
    items: list[Any] = [entry.model_dump() for entry in entries]
    items.extend(preserved or [])
    return json.dumps(items, indent=2, ensure_ascii=False)


class JsonFileStorage(VocabStorageInterface):
    """Stores the vocabulary list as one JSON file"""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._preserved: list[Any] = []

    def load_result(self) -> LoadResult:
        """Read the file, reporting whether the empty fallback was taken"""
        result = self._read()
        self._preserved = list(result.skipped)
        return result

    def load(self) -> list[VocabEntry]:
        return self.load_result().entries

    def save(self, entries: list[VocabEntry]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                dump_entries(entries, self._preserved), encoding="utf-8"
            )
        except OSError as e:
            raise StorageError("save", self.path, e) from e
        logger.debug(
            f"Saved {len(entries)} entries to {self.path}"
            + (f" ({len(self._preserved)} unreadable kept)" if self._preserved else "")
        )

    def _read(self) -> LoadResult:
        if not self.path.exists():
            return self._fallback(f"{self.path} does not exist")

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return self._fallback(f"cannot read {self.path}: {e}")

        try:
            document = json.loads(raw)
        except ValueError as e:
            return self._fallback(f"{self.path} is not valid JSON: {e}")

        if not isinstance(document, list):
            return self._fallback(f"{self.path} does not hold a JSON array")

        entries: list[VocabEntry] = []
        skipped: list[Any] = []
        for position, item in enumerate(document, 1):
            try:
                entries.append(VocabEntry.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    f"Skipping item {position} in {self.path}: "
                    f"{e.error_count()} validation errors"
                )
                skipped.append(item)

        logger.debug(f"Loaded {len(entries)} entries from {self.path}")
        return LoadResult(entries=entries, skipped=skipped)

    def _fallback(self, reason: str) -> LoadResult:
        logger.debug(f"Using empty vocabulary: {reason}")
        return LoadResult.empty(reason)


class InMemoryStorage(VocabStorageInterface):
    """Storage kept in process memory, used in tests and dry runs"""

    def __init__(self, entries: list[VocabEntry] | None = None):
        self._entries = [entry.model_copy(deep=True) for entry in entries or []]
        self.save_count = 0

    def load(self) -> list[VocabEntry]:
        return [entry.model_copy(deep=True) for entry in self._entries]

    def save(self, entries: list[VocabEntry]) -> None:
        self._entries = [entry.model_copy(deep=True) for entry in entries]
        self.save_count += 1

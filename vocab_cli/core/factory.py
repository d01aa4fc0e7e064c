"""Factory functions for creating configured instances"""

from pathlib import Path
from typing import cast

from rich.console import Console

from .container import DIContainer, setup_default_container
from .interfaces import VocabStorageInterface
from .vocabulary_service import VocabularyService


def create_vocabulary_service(
    data_file: Path | None = None,
    console: Console | None = None,
    container: DIContainer | None = None,
) -> VocabularyService:
    """Convenience function to create a vocabulary service"""
    container = container or setup_default_container(data_file)
    storage = cast(VocabStorageInterface, container.get(VocabStorageInterface))
    if storage is None:
        raise RuntimeError("No vocabulary storage registered in the container")
    return VocabularyService(storage=storage, console=console)

"""Dependency injection container for managing service dependencies"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..logging_config import get_logger
from .interfaces import VocabStorageInterface

logger = get_logger(__name__)


class DIContainer:
    """Maps interfaces to instances, building lazy singletons on first use"""

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}

    def register_instance(self, interface: type[Any], instance: Any) -> None:
        """Register a ready-made instance for an interface"""
        self._factories.pop(interface, None)
        self._instances[interface] = instance

    def register_singleton(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Register a factory called once, on the first get()"""
        self._instances.pop(interface, None)
        self._factories[interface] = factory

    def get(self, interface: type[Any]) -> Any | None:
        """Get the instance registered for an interface, if any"""
        if interface not in self._instances:
            factory = self._factories.pop(interface, None)
            if factory is None:
                return None
            self._instances[interface] = factory()
        return self._instances[interface]

    def has(self, interface: type[Any]) -> bool:
        """Check if the container can provide an instance of the interface"""
        return interface in self._instances or interface in self._factories


def setup_default_container(data_file: Path | None = None) -> DIContainer:
    """Setup container with the file-backed storage"""
    from ..config.settings import settings
    from .storage import JsonFileStorage

    path = data_file or settings.storage.data_file
    logger.info(f"Vocabulary file: {path}")
    container = DIContainer()
    container.register_singleton(VocabStorageInterface, lambda: JsonFileStorage(path))
    return container

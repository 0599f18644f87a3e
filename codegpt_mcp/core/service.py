"""Base service class for the CodeGPT MCP gateway."""

from abc import ABC, abstractmethod
from typing import Optional, Any
import logging


class BaseService(ABC):
    """Async lifecycle shared by long-lived services.

    Subclasses implement ``_initialize`` and optionally ``_shutdown``. A
    service can also be used as an async context manager.
    """

    def __init__(self, config: Optional[Any] = None):
        self.config = config
        self._logger = logging.getLogger(self.__class__.__name__)
        self._initialized = False

    async def initialize(self) -> None:
        if self._initialized:
            self._logger.warning(f"{self.__class__.__name__} already initialized")
            return

        try:
            await self._initialize()
        except Exception as e:
            self._logger.error(f"Failed to initialize {self.__class__.__name__}: {e}")
            raise
        self._initialized = True

    @abstractmethod
    async def _initialize(self) -> None:
        """Service-specific initialization."""

    async def shutdown(self) -> None:
        if not self._initialized:
            return

        try:
            await self._shutdown()
        finally:
            self._initialized = False
        self._logger.debug(f"{self.__class__.__name__} shut down")

    async def _shutdown(self) -> None:
        """Service-specific shutdown."""

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.shutdown()

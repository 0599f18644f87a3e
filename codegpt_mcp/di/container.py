"""Dependency Injection Container implementation."""

from __future__ import annotations
from typing import Dict, Any, TypeVar, Type, Callable, List
import inspect
import logging

from ..core import ServiceError, DependencyError


T = TypeVar('T')

logger = logging.getLogger(__name__)


class DIContainer:
    """Central dependency injection container.

    Factories receive the container when they declare a ``container``
    parameter. Instances exposing ``initialize`` are initialized on creation
    and shut down in reverse creation order.
    """

    def __init__(self):
        self._services: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable] = {}
        self._singleton_types: set = set()
        self._created: List[Any] = []
        self._initialized = False

    def register_factory(
        self,
        interface: Type[T],
        factory: Callable[..., Any],
        singleton: bool = True
    ) -> None:
        """Register a factory function for creating instances."""
        self._factories[interface] = factory
        if singleton:
            self._singleton_types.add(interface)

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """Register an existing instance."""
        self._services[interface] = instance

    async def get(self, interface: Type[T]) -> T:
        """Get an instance of the requested interface."""
        if interface in self._services:
            return self._services[interface]

        instance = await self._create_instance(interface)
        if interface in self._singleton_types:
            self._services[interface] = instance
        return instance

    async def _create_instance(self, interface: Type[T]) -> T:
        """Create an instance using the registered factory."""
        if interface not in self._factories:
            raise DependencyError(
                f"No factory registered for {interface.__name__}",
                dependency=interface.__name__
            )

        factory = self._factories[interface]

        try:
            kwargs = {}
            if 'container' in inspect.signature(factory).parameters:
                kwargs['container'] = self

            if inspect.iscoroutinefunction(factory):
                instance = await factory(**kwargs)
            else:
                instance = factory(**kwargs)

            if hasattr(instance, 'initialize') and not instance.is_initialized:
                await instance.initialize()

        except ServiceError:
            raise
        except Exception as e:
            raise ServiceError(
                f"Failed to create instance of {interface.__name__}: {str(e)}",
                error_code="INSTANCE_CREATION_FAILED",
                details={"interface": interface.__name__, "error": str(e)}
            ) from e

        self._created.append(instance)
        return instance

    async def initialize_all(self):
        """Create and initialize all registered singletons."""
        if self._initialized:
            return

        for interface in list(self._factories):
            if interface in self._singleton_types:
                await self.get(interface)

        self._initialized = True

    async def shutdown(self):
        """Shutdown all services."""
        for instance in reversed(self._created):
            if hasattr(instance, 'shutdown'):
                try:
                    await instance.shutdown()
                except Exception as e:
                    logger.error(f"Error shutting down {instance.__class__.__name__}: {e}")

        self._created.clear()
        self._services.clear()
        self._initialized = False

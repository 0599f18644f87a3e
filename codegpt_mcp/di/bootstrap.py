"""Bootstrap configuration for Dependency Injection."""

from typing import Optional

import httpx

from .container import DIContainer
from ..backend import BackendService
from ..config import Config
from ..tools import ToolGateway, tools_for


async def create_container(
    config: Config,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> DIContainer:
    """Create the container holding the backend service and the gateway.

    ``transport`` replaces the network transport of the HTTP client; tests
    pass an ``httpx.MockTransport`` here.
    """
    config.check_required()

    container = DIContainer()

    # Register configuration
    container.register_instance(Config, config)

    container.register_factory(
        BackendService,
        lambda: BackendService(config.backend, transport=transport),
        singleton=True
    )

    async def gateway_factory(container: DIContainer) -> ToolGateway:
        backend = await container.get(BackendService)
        return ToolGateway(config.backend, backend, tools_for(config.toolset))

    container.register_factory(ToolGateway, gateway_factory, singleton=True)

    await container.initialize_all()

    return container

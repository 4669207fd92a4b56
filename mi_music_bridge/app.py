"""
mi-music bridge — FastAPI application factory.

Provides three public APIs:

- ``create_bridge_app(bridge)`` — creates a fully wired FastAPI app: sets the
  bridge context, registers the Umeng config channel, and mounts the
  endpoints.  This is the recommended way to serve a bridge.

- ``run_bridge_app(bridge)`` — creates the app AND starts the uvicorn
  server.  One-liner entry point.

- ``add_bridge_endpoints(app, bridge, registry)`` — lower-level: registers
  only the endpoint routers on an existing app (caller owns the channels).

Usage::

    from mi_music_bridge import run_bridge_app
    from mi_music_bridge.bridges.android import AndroidBridge

    run_bridge_app(AndroidBridge(), title="Android Bridge")
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from mi_music_bridge.bridge import PlatformBridge
from mi_music_bridge.channel import ChannelRegistry
from mi_music_bridge.endpoint import UmengConfigEndpoint
from mi_music_bridge.platform.context import BridgeContext

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# High-level: create_bridge_app
# ------------------------------------------------------------------


def create_bridge_app(
    bridge: PlatformBridge,
    *,
    title: str = "mi-music Native Bridge",
    version: str = "0.1.0",
    registry: Optional[ChannelRegistry] = None,
    enable_capabilities: bool = True,
) -> FastAPI:
    """Create a fully wired FastAPI application for a platform bridge.

    1. **Context** — if the bridge has no ``BridgeContext`` yet, one is built
       from ``BUNDLE_PATH``.
    2. **Channels** — the Umeng config endpoint is registered on its channel
       before any route is reachable.
    3. **Routes** — channel dispatch, health and capabilities.

    Args:
        bridge: A ``PlatformBridge`` implementation (e.g. ``AndroidBridge``).
        title: FastAPI application title.
        version: Application version string.
        registry: Channel registry to register into (a fresh one by default).
        enable_capabilities: Mount ``GET /capabilities``.

    Returns:
        A ready-to-use ``FastAPI`` application.
    """
    if bridge.context is None:
        bridge.set_context(BridgeContext.from_env())

    registry = registry if registry is not None else ChannelRegistry()
    UmengConfigEndpoint(bridge).register(registry)

    platform = bridge.capabilities().platform

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Native bridge ready (platform={platform})")
        yield
        logger.info("Native bridge shut down")

    app = FastAPI(title=title, version=version, lifespan=lifespan)

    add_bridge_endpoints(
        app,
        bridge,
        registry,
        enable_capabilities=enable_capabilities,
    )

    return app


# ------------------------------------------------------------------
# Low-level: add_bridge_endpoints
# ------------------------------------------------------------------


def add_bridge_endpoints(
    app: FastAPI,
    bridge: PlatformBridge,
    registry: ChannelRegistry,
    *,
    enable_capabilities: bool = True,
) -> None:
    """Register bridge endpoints on an existing FastAPI app.

    Channels must already be registered in ``registry``.  For most cases,
    prefer ``create_bridge_app()`` instead.
    """
    # Endpoints reach the bridge and channels through app state
    app.state.bridge = bridge
    app.state.channels = registry

    from mi_music_bridge.endpoints.channels import router as channels_router
    from mi_music_bridge.endpoints.health import router as health_router

    app.include_router(channels_router)
    app.include_router(health_router)

    if enable_capabilities:
        from mi_music_bridge.endpoints.capabilities import router as cap_router

        app.include_router(cap_router)

    caps = bridge.capabilities()
    logger.info(
        f"Bridge endpoints registered: platform={caps.platform}, "
        f"channels={registry.names()}"
    )


# ------------------------------------------------------------------
# One-liner: run_bridge_app
# ------------------------------------------------------------------


def run_bridge_app(
    app_or_bridge: FastAPI | PlatformBridge,
    *,
    title: str = "mi-music Native Bridge",
    version: str = "0.1.0",
    host: str | None = None,
    port: int | None = None,
    log_level: str = "info",
    **kwargs,
) -> None:
    """Start the uvicorn server for a platform bridge.

    Accepts either a pre-built ``FastAPI`` app (from ``create_bridge_app``)
    or a ``PlatformBridge`` (creates the app for you).

    Reads ``BRIDGE_HOST`` and ``BRIDGE_PORT`` from environment if not provided.
    """
    import uvicorn

    if isinstance(app_or_bridge, FastAPI):
        app = app_or_bridge
    else:
        app = create_bridge_app(app_or_bridge, title=title, version=version, **kwargs)

    resolved_host = host or os.getenv("BRIDGE_HOST", "0.0.0.0")
    resolved_port = port or int(os.getenv("BRIDGE_PORT", "8000"))

    logger.info(f"Starting on {resolved_host}:{resolved_port}")
    uvicorn.run(app, host=resolved_host, port=resolved_port, log_level=log_level)

"""GET /capabilities — reports the platform's config resource and channels."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/capabilities")
async def get_capabilities(request: Request):
    """Return the capabilities manifest from the bridge."""
    bridge = request.app.state.bridge
    caps = bridge.capabilities()
    context = bridge.context

    return {
        "platform": caps.platform,
        "resource_name": caps.resource_name,
        "resource_path": str(bridge.resource_path()),
        "keys": {
            "appKey": caps.app_key_field,
            "channel": caps.channel_field,
        },
        "channels": request.app.state.channels.names(),
        "bundle_path": context.bundle_path if context else None,
    }

"""mi-music native bridge server."""

import os

from mi_music_bridge import create_bridge_app, run_bridge_app
from mi_music_bridge.bridge import PlatformBridge
from mi_music_bridge.bridges.android import AndroidBridge
from mi_music_bridge.bridges.ios import IOSBridge

_BRIDGES = {
    "android": AndroidBridge,
    "ios": IOSBridge,
}


def make_bridge(platform: str) -> PlatformBridge:
    try:
        return _BRIDGES[platform.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown BRIDGE_PLATFORM {platform!r}, expected one of {sorted(_BRIDGES)}"
        ) from None


app = create_bridge_app(
    make_bridge(os.getenv("BRIDGE_PLATFORM", "android")),
    title="mi-music Native Bridge",
)

if __name__ == "__main__":
    run_bridge_app(app)

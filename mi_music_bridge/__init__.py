"""
mi-music native bridge — serves optional Umeng analytics credentials to the
UI layer over the ``cn.jokeo.mi_music/umeng_config`` channel.

Quick start::

    from mi_music_bridge import create_bridge_app
    from mi_music_bridge.bridges.android import AndroidBridge

    app = create_bridge_app(AndroidBridge(), title="Android Bridge")

To support another host, subclass ``PlatformBridge``::

    from mi_music_bridge import PlatformBridge, PlatformCapabilities

    class MyBridge(PlatformBridge):
        def capabilities(self): ...
        def resource_path(self): ...
        def load_config(self): ...
"""

from mi_music_bridge.app import add_bridge_endpoints, create_bridge_app, run_bridge_app
from mi_music_bridge.bridge import PlatformBridge, PlatformCapabilities
from mi_music_bridge.channel import ChannelRegistry, MethodCall, MethodChannel, MethodResult
from mi_music_bridge.endpoint import UmengConfigEndpoint

__all__ = [
    "create_bridge_app",
    "run_bridge_app",
    "add_bridge_endpoints",
    "PlatformBridge",
    "PlatformCapabilities",
    "ChannelRegistry",
    "MethodCall",
    "MethodChannel",
    "MethodResult",
    "UmengConfigEndpoint",
]

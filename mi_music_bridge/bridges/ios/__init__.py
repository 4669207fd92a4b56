"""
iOS bridge for the mi-music Umeng config channel.

Usage::

    from mi_music_bridge.bridges.ios import IOSBridge

    app = create_bridge_app(IOSBridge(), title="iOS Bridge")
"""

from mi_music_bridge.bridges.ios.bridge import IOSBridge

__all__ = ["IOSBridge"]

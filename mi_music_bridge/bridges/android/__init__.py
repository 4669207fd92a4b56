"""
Android bridge for the mi-music Umeng config channel.

Usage::

    from mi_music_bridge.bridges.android import AndroidBridge

    app = create_bridge_app(AndroidBridge(), title="Android Bridge")
"""

from mi_music_bridge.bridges.android.bridge import AndroidBridge

__all__ = ["AndroidBridge"]

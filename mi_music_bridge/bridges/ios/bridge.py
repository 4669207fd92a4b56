"""
IOSBridge — PlatformBridge implementation for the iOS host.

The Umeng config ships as ``umeng_config.plist`` at the root of the app
bundle.  Only a flat dictionary of strings is accepted, matching a
``[String: String]`` cast on the native side.
"""

from pathlib import Path
from typing import Optional

from mi_music_bridge.bridge import PlatformBridge, PlatformCapabilities
from mi_music_bridge.constants import (
    IOS_APP_KEY_FIELD,
    IOS_CHANNEL_FIELD,
    IOS_RESOURCE_NAME,
    IOS_RESOURCE_TYPE,
)
from mi_music_bridge.platform.config import load_plist_resource
from mi_music_bridge.platform.resources import resolve_ios_resource


class IOSBridge(PlatformBridge):
    """Bridge between the Umeng config channel and an iOS app bundle."""

    def capabilities(self) -> PlatformCapabilities:
        return PlatformCapabilities(
            platform="ios",
            resource_name=f"{IOS_RESOURCE_NAME}.{IOS_RESOURCE_TYPE}",
            app_key_field=IOS_APP_KEY_FIELD,
            channel_field=IOS_CHANNEL_FIELD,
        )

    def resource_path(self) -> Path:
        return resolve_ios_resource(self.resolved_context())

    def load_config(self) -> Optional[dict[str, str]]:
        return load_plist_resource(self.resource_path())

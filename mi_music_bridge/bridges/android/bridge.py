"""
AndroidBridge — PlatformBridge implementation for the Android host.

The Umeng config ships as ``assets/umeng_config.properties`` inside the
application package and is read with ``java.util.Properties`` semantics.
"""

from pathlib import Path
from typing import Optional

from mi_music_bridge.bridge import PlatformBridge, PlatformCapabilities
from mi_music_bridge.constants import (
    ANDROID_APP_KEY_FIELD,
    ANDROID_CHANNEL_FIELD,
    ANDROID_RESOURCE_NAME,
)
from mi_music_bridge.platform.config import load_properties_resource
from mi_music_bridge.platform.resources import resolve_android_asset


class AndroidBridge(PlatformBridge):
    """Bridge between the Umeng config channel and an Android package."""

    def capabilities(self) -> PlatformCapabilities:
        return PlatformCapabilities(
            platform="android",
            resource_name=ANDROID_RESOURCE_NAME,
            app_key_field=ANDROID_APP_KEY_FIELD,
            channel_field=ANDROID_CHANNEL_FIELD,
        )

    def resource_path(self) -> Path:
        return resolve_android_asset(self.resolved_context())

    def load_config(self) -> Optional[dict[str, str]]:
        return load_properties_resource(self.resource_path())

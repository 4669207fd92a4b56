"""
Platform modules — shared by the Android and iOS bridges.

Provides the bridge context, bundled resource resolution, config resource
loading and the credential projection.
"""

from mi_music_bridge.platform.context import BridgeContext
from mi_music_bridge.platform.config import (
    load_plist_resource,
    load_properties_resource,
)
from mi_music_bridge.platform.credentials import CredentialPair, project_credentials
from mi_music_bridge.platform.resources import (
    resolve_android_asset,
    resolve_ios_resource,
)

__all__ = [
    "BridgeContext",
    "CredentialPair",
    "project_credentials",
    "load_plist_resource",
    "load_properties_resource",
    "resolve_android_asset",
    "resolve_ios_resource",
]

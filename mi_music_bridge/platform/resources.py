"""
Resource path resolution for bundled, read-only config artifacts.

Each platform ships the Umeng config in a different place:

- Android packs it into the APK's ``assets/`` directory
- iOS copies it to the root of the app bundle as ``<name>.<type>``

``UMENG_CONFIG_PATH`` overrides both (useful for local runs and tests).
Resolution never touches the filesystem; existence is the loader's concern.
"""

import logging
from pathlib import Path
from typing import Optional

from mi_music_bridge.constants import (
    ANDROID_ASSETS_DIR,
    ANDROID_RESOURCE_NAME,
    IOS_RESOURCE_NAME,
    IOS_RESOURCE_TYPE,
)
from mi_music_bridge.platform.context import BridgeContext

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "UMENG_CONFIG_PATH"


def _override_path(context: BridgeContext) -> Optional[Path]:
    override = (context.get_env(CONFIG_PATH_ENV) or "").strip()
    if override:
        logger.debug(f"{CONFIG_PATH_ENV} set, using {override}")
        return Path(override)
    return None


def resolve_android_asset(context: BridgeContext, name: str = ANDROID_RESOURCE_NAME) -> Path:
    """Return the path of an asset bundled into the application package."""
    override = _override_path(context)
    if override is not None:
        return override
    return Path(context.bundle_path) / ANDROID_ASSETS_DIR / name


def resolve_ios_resource(
    context: BridgeContext,
    name: str = IOS_RESOURCE_NAME,
    of_type: str = IOS_RESOURCE_TYPE,
) -> Path:
    """Return the path of a bundle resource, like ``path(forResource:ofType:)``."""
    override = _override_path(context)
    if override is not None:
        return override
    filename = f"{name}.{of_type}" if of_type else name
    return Path(context.bundle_path) / filename

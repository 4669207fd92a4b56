"""
PlatformBridge — abstract base class for platform-specific bridges.

Each native platform (Android, iOS) provides a bridge implementation that
knows where its Umeng config resource is bundled, how to parse it, and which
keys it uses.  Everything else (channel handling, response shaping, HTTP
exposure) is shared and works against this interface.

Minimal implementation example::

    class MyBridge(PlatformBridge):
        def capabilities(self) -> PlatformCapabilities:
            return PlatformCapabilities(
                platform="my-platform",
                resource_name="umeng.json",
                app_key_field="appkey",
                channel_field="channel",
            )

        def resource_path(self) -> Path:
            return Path("/etc/umeng.json")

        def load_config(self) -> Optional[dict[str, str]]:
            return load_json_somehow(self.resource_path())
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mi_music_bridge.platform.context import BridgeContext
from mi_music_bridge.platform.credentials import CredentialPair, project_credentials


@dataclass
class PlatformCapabilities:
    """Declares the config resource a platform reads and its key names.

    Used by the ``/capabilities`` endpoint and by ``get_umeng_config()`` to
    project the raw config onto a ``CredentialPair``.
    """

    platform: str
    resource_name: str
    app_key_field: str
    channel_field: str


class PlatformBridge(ABC):
    """Abstract bridge between the UI layer's channel and a native platform.

    **Required** (must implement):

    - ``capabilities()`` — declares the resource name and key names
    - ``resource_path()`` — resolves where the resource is bundled
    - ``load_config()`` — parses the resource, ``None`` when unavailable

    **Lifecycle** (override as needed):

    - ``set_context()`` — receives the ``BridgeContext`` at startup
    """

    def __init__(self, context: Optional[BridgeContext] = None) -> None:
        self._context: BridgeContext | None = context

    # ------------------------------------------------------------------
    # Required (abstract)
    # ------------------------------------------------------------------

    @abstractmethod
    def capabilities(self) -> PlatformCapabilities:
        """Return the capabilities of this platform."""
        ...

    @abstractmethod
    def resource_path(self) -> Path:
        """Return the expected location of the config resource."""
        ...

    @abstractmethod
    def load_config(self) -> Optional[dict[str, str]]:
        """Read and parse the config resource.

        Must never raise: a missing, unreadable or malformed resource is
        reported as ``None``.  A parsed resource is returned in full, even if
        it is empty or holds unrelated keys.
        """
        ...

    # ------------------------------------------------------------------
    # Lifecycle (override in subclasses as needed)
    # ------------------------------------------------------------------

    def set_context(self, context: BridgeContext) -> None:
        """Store the bridge context for later use.

        Called before the channel is registered.
        """
        self._context = context

    # ------------------------------------------------------------------
    # Shared behaviour
    # ------------------------------------------------------------------

    def get_umeng_config(self) -> CredentialPair:
        """Load the config resource and project it onto a ``CredentialPair``.

        Reads the resource afresh on every call.
        """
        caps = self.capabilities()
        return project_credentials(
            self.load_config(),
            caps.app_key_field,
            caps.channel_field,
        )

    def resolved_context(self) -> BridgeContext:
        """The current context, or one built from ``BUNDLE_PATH`` if unset."""
        return self._context or BridgeContext.from_env()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def context(self) -> Optional[BridgeContext]:
        """The current ``BridgeContext``, or ``None`` before ``set_context()``."""
        return self._context

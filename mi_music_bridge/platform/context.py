"""
Bridge context — bundle location and environment for a platform bridge.

The ``BridgeContext`` is created once at startup and passed to the bridge
via ``set_context()``.  It provides typed access to environment variables
and the root of the application package/bundle the resources live in.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class BridgeContext:
    """Context provided to platform bridges.

    Args:
        bundle_path: Root of the application package (Android) or bundle (iOS).
        environment: Extra environment overrides (merged with ``os.environ``).
    """

    bundle_path: str
    environment: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Merge environment variables (explicit overrides win)."""
        self.environment = {**os.environ, **self.environment}

    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get an environment variable value."""
        return self.environment.get(key, default)

    @classmethod
    def from_env(cls) -> "BridgeContext":
        """Build a context from ``BUNDLE_PATH`` (defaults to the cwd)."""
        return cls(bundle_path=os.getenv("BUNDLE_PATH", "") or os.getcwd())

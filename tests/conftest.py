"""
Shared fixtures for bridge unit tests.
"""

import plistlib
from pathlib import Path
from typing import Any

import pytest

from mi_music_bridge.platform.context import BridgeContext


# ------------------------------------------------------------------
# Bundle factories
# ------------------------------------------------------------------


def write_properties(bundle: Path, text: str) -> Path:
    """Write ``assets/umeng_config.properties`` under an Android package root."""
    assets = bundle / "assets"
    assets.mkdir(parents=True, exist_ok=True)
    path = assets / "umeng_config.properties"
    path.write_bytes(text.encode("latin-1"))
    return path


def write_plist(bundle: Path, data: Any, fmt=plistlib.FMT_XML) -> Path:
    """Write ``umeng_config.plist`` at the root of an iOS bundle."""
    bundle.mkdir(parents=True, exist_ok=True)
    path = bundle / "umeng_config.plist"
    with open(path, "wb") as f:
        plistlib.dump(data, f, fmt=fmt)
    return path


@pytest.fixture
def bundle(tmp_path: Path) -> Path:
    """An empty application package / bundle root."""
    root = tmp_path / "bundle"
    root.mkdir()
    return root


@pytest.fixture
def context(bundle: Path, monkeypatch) -> BridgeContext:
    """A context pointing at ``bundle`` with no path override."""
    monkeypatch.delenv("UMENG_CONFIG_PATH", raising=False)
    return BridgeContext(bundle_path=str(bundle))

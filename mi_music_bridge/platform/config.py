"""
Config resource loading for the platform bridges.

Both loaders are best-effort: a missing, unreadable or unparsable resource
yields ``None`` and is never raised to the caller.  The Umeng config is an
optional deployment artifact, so absence is a normal outcome.
"""

import logging
import plistlib
from pathlib import Path
from typing import Optional

import javaproperties

logger = logging.getLogger(__name__)


def load_properties_resource(path: Path) -> Optional[dict[str, str]]:
    """Load a ``java.util.Properties`` style file.

    The file is read as bytes and decoded as ISO-8859-1, with ``\\uXXXX``
    escapes, comments and line continuations handled the way
    ``Properties.load(InputStream)`` does.

    Returns:
        Every key/value pair in the file, or ``None`` if it could not be
        opened or parsed.
    """
    try:
        with open(path, "rb") as f:
            props = javaproperties.load(f)
        logger.debug(f"Loaded {len(props)} properties from {path}")
        return dict(props)
    except FileNotFoundError:
        logger.info(f"No config resource found at {path}")
        return None
    except Exception as e:
        logger.warning(f"Failed to parse properties resource {path}: {e}")
        return None


def load_plist_resource(path: Path) -> Optional[dict[str, str]]:
    """Load a property list whose top level is a ``str -> str`` dictionary.

    XML and binary plists are both accepted.  A plist whose root is not a
    dictionary, or that holds any non-string key or value, is rejected as a
    whole rather than filtered.

    Returns:
        The dictionary, or ``None`` if it could not be opened, parsed, or is
        not a flat string dictionary.
    """
    try:
        with open(path, "rb") as f:
            data = plistlib.load(f)
    except FileNotFoundError:
        logger.info(f"No config resource found at {path}")
        return None
    except Exception as e:
        logger.warning(f"Failed to parse plist resource {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(
            f"Plist resource {path} has a {type(data).__name__} root, expected dict"
        )
        return None

    if not all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
        logger.warning(f"Plist resource {path} contains non-string entries")
        return None

    logger.debug(f"Loaded {len(data)} entries from {path}")
    return data

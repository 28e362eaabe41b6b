"""Project manifest lookup for a default issue tracker URL.

Handles:
- Finding the nearest package.json, walking up from a start directory
- Reading the ``bugs`` field, falling back to ``repository``
- Degrading any lookup failure to "no tracker reference"
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from todolint.errors import ManifestLookupError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def find_manifest(start_dir: Optional[str] = None) -> Optional[str]:
    """Return the path of the nearest manifest at or above start_dir."""
    current = os.path.abspath(os.path.expanduser(start_dir or os.getcwd()))
    while True:
        candidate = os.path.join(current, MANIFEST_NAME)
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def load_manifest(path: str) -> Dict[str, Any]:
    """Read a manifest file as a JSON object."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ManifestLookupError(f"Cannot read manifest '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ManifestLookupError(f"Manifest '{path}' is not a JSON object")
    return data


def _url_field(value: Any) -> Optional[str]:
    """A field may be a plain string or an object with a ``url`` key."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        url = value.get("url")
        if isinstance(url, str) and url:
            return url
    return None


def tracker_url_from_manifest(data: Dict[str, Any]) -> Optional[str]:
    """
    Get the issue tracker URL declared by a manifest.

    Priority:
    1. ``bugs`` (string, or object with ``url``)
    2. ``repository`` (string, or object with ``url``)
    """
    return _url_field(data.get("bugs")) or _url_field(data.get("repository"))


class ManifestTrackerResolver:
    """Resolves the default tracker URL from the nearest project manifest."""

    def __init__(self, start_dir: Optional[str] = None):
        self.start_dir = start_dir

    def __call__(self) -> Optional[str]:
        path = find_manifest(self.start_dir)
        if path is None:
            logger.debug("No %s found above %s", MANIFEST_NAME, self.start_dir or os.getcwd())
            return None

        try:
            data = load_manifest(path)
        except ManifestLookupError as e:
            logger.warning("%s; continuing without a tracker reference", e)
            return None

        url = tracker_url_from_manifest(data)
        if url is None:
            logger.debug("Manifest %s declares no bugs or repository URL", path)
        return url

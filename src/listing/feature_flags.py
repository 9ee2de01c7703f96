"""Feature flag lookups with an explicitly owned cache.

The cache belongs to whoever creates the ``FeatureFlagCache``; there is no
module-level state. Only successful lookups are cached, so a flag that
failed to load is asked for again next time.
"""

from typing import Dict, Optional

import requests

from config import config
from config.constants import FEATURE_FLAG_IDS
from config.logging_config import get_logger

logger = get_logger("feature_flags")


class FeatureFlagCache:
    """Caches feature flag states fetched from ``/api/feature-flags/{id}``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or config.listing.base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or config.listing.timeout_seconds
        self._flags: Dict[str, bool] = {}

    def is_enabled(self, flag_id: str) -> bool:
        """
        Check whether a feature flag is enabled.

        Unknown flag ids, transport errors and non-2xx responses all read
        as disabled.

        Args:
            flag_id: One of the known feature flag ids.

        Returns:
            True if the flag is enabled.
        """
        if flag_id in self._flags:
            return self._flags[flag_id]

        if flag_id not in FEATURE_FLAG_IDS:
            logger.warning(f"Unknown feature flag: {flag_id}")
            return False

        url = f"{self.base_url}/api/feature-flags/{flag_id}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error checking feature flag {flag_id}: {e}")
            return False

        if not response.ok:
            logger.warning(f"Failed to fetch feature flag: {flag_id} (HTTP {response.status_code})")
            return False

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Feature flag response for {flag_id} is not JSON")
            return False

        enabled = bool(data.get("enabled", False)) if isinstance(data, dict) else False
        self._flags[flag_id] = enabled
        return enabled

    def invalidate(self, flag_id: Optional[str] = None) -> None:
        """Forget one cached flag, or all of them."""
        if flag_id is None:
            self._flags.clear()
        else:
            self._flags.pop(flag_id, None)

    @property
    def cached(self) -> Dict[str, bool]:
        """Snapshot of the currently cached flags."""
        return dict(self._flags)

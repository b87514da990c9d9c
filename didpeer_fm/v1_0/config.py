"""Configuration for did:peer resolution."""

import logging
from typing import Any, Dict, Optional

from .key_types import VerificationMaterialFormat

LOGGER = logging.getLogger(__name__)


class PeerDIDConfig:
    """Configuration class for did:peer resolution."""

    DEFAULT_FORMAT = VerificationMaterialFormat.MULTIBASE

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """Initialize did:peer configuration.

        Args:
            settings: Settings dictionary, e.g. {"peer_did.default_format": "jwk"}
        """
        self.settings = settings or {}

        # Format of verification material in resolved documents
        self.default_format = self._get_format(
            "peer_did.default_format", self.DEFAULT_FORMAT
        )

        # Logging
        self.log_operations = self._get_bool("peer_did.log_operations", False)

        LOGGER.debug(f"did:peer config initialized: {self.get_summary()}")

    def _get_str(self, key: str, default: str) -> str:
        """Get string setting."""
        return self.settings.get(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean setting."""
        value = self.settings.get(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return bool(value)

    def _get_format(
        self, key: str, default: VerificationMaterialFormat
    ) -> VerificationMaterialFormat:
        """Get verification material format setting."""
        value = self._get_str(key, default.value)
        if isinstance(value, VerificationMaterialFormat):
            return value
        try:
            return VerificationMaterialFormat(str(value).lower())
        except ValueError:
            LOGGER.warning(
                f"Unknown verification material format {value!r} for {key}, "
                f"using {default.value}"
            )
            return default

    def get_summary(self) -> str:
        """Get configuration summary."""
        return (
            f"Format={self.default_format.value}, "
            f"LogOperations={self.log_operations}"
        )

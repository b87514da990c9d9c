"""Errors raised while building and resolving did:peer identifiers."""

from typing import Optional


class PeerDIDError(Exception):
    """Base class for did:peer errors."""


class InvalidPeerDIDError(PeerDIDError):
    """Identifier string is empty, malformed, or uses an unknown numalgo."""


class UnsupportedBaseError(PeerDIDError):
    """Ecnumbasis prefix character does not name a known multibase."""


class UnknownCodecError(PeerDIDError):
    """Decoded bytes do not start with a known multicodec prefix."""


class InvalidKeySizeError(PeerDIDError):
    """Key bytes are not exactly 32 bytes long."""


class KeyDecodeError(PeerDIDError):
    """Verification material value cannot be turned into raw key bytes."""


class InvalidServiceError(PeerDIDError):
    """Compact service block cannot be decoded."""


class EncodingError(PeerDIDError):
    """Service block could not be serialized."""


class EcnumbasisCreationError(PeerDIDError):
    """Ecnumbasis could not be created or decoded.

    The underlying cause is kept in ``derived_error``.
    """

    def __init__(self, message: str, derived_error: Optional[Exception] = None):
        super().__init__(message)
        self.derived_error = derived_error

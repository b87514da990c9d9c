"""Multicodec registry for the key kinds used in did:peer.

Only Ed25519 and X25519 public keys can appear in numalgo 0 and numalgo 2
identifiers, so the registry is a fixed module-level table.
"""

from enum import Enum
from typing import Tuple

from .errors import UnknownCodecError


class KeyCodec(Enum):
    """Key kinds with a registered multicodec prefix."""

    ED25519 = "ed25519-pub"
    X25519 = "x25519-pub"

    @property
    def prefix(self) -> bytes:
        """Varint-encoded multicodec prefix for this key kind."""
        return MULTICODECS[self]


# https://github.com/multiformats/multicodec/blob/master/table.csv
MULTICODECS = {
    KeyCodec.ED25519: b"\xed\x01",
    KeyCodec.X25519: b"\xec\x01",
}


def wrap(codec: KeyCodec, data: bytes) -> bytes:
    """Wrap raw key bytes with the multicodec prefix of ``codec``.

    Args:
        codec: Key kind
        data: Raw key bytes to wrap

    Returns:
        Multicodec-prefixed bytes
    """
    return MULTICODECS[codec] + data


def unwrap(data: bytes) -> Tuple[KeyCodec, bytes]:
    """Split multicodec-prefixed bytes into key kind and raw key bytes.

    Args:
        data: Multicodec-prefixed key bytes

    Returns:
        Tuple of (codec, raw_key_bytes)

    Raises:
        UnknownCodecError: If data doesn't start with a known multicodec prefix
    """
    for codec, prefix in MULTICODECS.items():
        if data.startswith(prefix):
            return codec, data[len(prefix):]

    raise UnknownCodecError(
        f"Unknown multicodec prefix. "
        f"Data starts with: {data[:2].hex() or 'empty'}"
    )

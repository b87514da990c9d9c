"""Tests for the multicodec registry."""

import pytest

from ..errors import UnknownCodecError
from ..multicodec import MULTICODECS, KeyCodec, unwrap, wrap


class TestMulticodec:
    """Test multicodec wrapping."""

    def test_prefixes(self):
        """Test registered prefixes."""
        assert KeyCodec.ED25519.prefix == b"\xed\x01"
        assert KeyCodec.X25519.prefix == b"\xec\x01"
        assert set(MULTICODECS) == set(KeyCodec)

    def test_wrap_unwrap(self):
        """Test wrapping and unwrapping key bytes."""
        key = bytes(range(32))
        for codec in KeyCodec:
            wrapped = wrap(codec, key)
            assert wrapped[:2] == codec.prefix
            assert unwrap(wrapped) == (codec, key)

    def test_unknown_prefix(self):
        """Test unknown prefix is rejected."""
        with pytest.raises(UnknownCodecError):
            unwrap(b"\x12\x20" + bytes(32))

    def test_empty_data(self):
        """Test empty data is rejected."""
        with pytest.raises(UnknownCodecError, match="empty"):
            unwrap(b"")

    def test_short_data(self):
        """Test the error names the bytes of a too-short prefix."""
        with pytest.raises(UnknownCodecError, match="Data starts with: ed$"):
            unwrap(b"\xed")

"""Tests for the base64url helpers."""

import pytest

from ..utils import b64url_decode, b64url_encode


class TestBase64Url:
    """Test unpadded base64url."""

    def test_encode_unpadded(self):
        """Test padding is stripped."""
        assert b64url_encode(b"ab") == "YWI"
        assert b64url_encode(b"\xfb\xff") == "-_8"

    def test_decode_with_or_without_padding(self):
        """Test padding is optional."""
        assert b64url_decode("YWI") == b"ab"
        assert b64url_decode("YWI=") == b"ab"

    @pytest.mark.parametrize("value", ["YWJj\n", "YW Jj", "+/8", "a"])
    def test_decode_rejects(self, value):
        """Test characters outside the alphabet and impossible lengths."""
        with pytest.raises(ValueError):
            b64url_decode(value)

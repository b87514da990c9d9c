"""Unpadded base64url helpers."""

import base64
import binascii
import re

B64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding characters."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(value: str) -> bytes:
    """Decode base64url text, with or without padding.

    Raises:
        ValueError: If value contains characters outside the base64url
            alphabet or has an impossible length
    """
    unpadded = value.rstrip("=")
    if not B64URL_PATTERN.fullmatch(unpadded):
        raise ValueError("Value is not base64url encoded")
    try:
        return base64.urlsafe_b64decode(unpadded + "=" * (-len(unpadded) % 4))
    except binascii.Error as err:
        raise ValueError(f"Invalid base64url value: {err}") from err

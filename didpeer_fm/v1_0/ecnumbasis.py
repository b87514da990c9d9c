"""Convert verification material to and from ecnumbasis strings.

An ecnumbasis is the multibase encoding of a multicodec-prefixed public key,
e.g. ``z6MkhaXgBZDvotDkL5257faiztiGiC2QtKLGpbnnEGta2doK`` for an Ed25519 key.
"""

import logging
from typing import Tuple

from multiformats import multibase

from .errors import (
    EcnumbasisCreationError,
    InvalidKeySizeError,
    UnsupportedBaseError,
)
from .key_types import VerificationMaterialFormat, material_type_for
from .models import VerificationMaterial
from .multicodec import unwrap, wrap

LOGGER = logging.getLogger(__name__)

KEY_SIZE = 32


def validate_key_length(key: bytes):
    """Raise unless ``key`` is exactly KEY_SIZE bytes long.

    Raises:
        EcnumbasisCreationError: wrapping an InvalidKeySizeError
    """
    if len(key) != KEY_SIZE:
        error = InvalidKeySizeError(
            f"Invalid key size: expected {KEY_SIZE} bytes, got {len(key)}"
        )
        raise EcnumbasisCreationError(str(error), derived_error=error) from error


def create_multibase_ecnumbasis(material: VerificationMaterial) -> str:
    """Encode verification material as a base58btc ecnumbasis.

    Args:
        material: Ed25519 or X25519 verification material

    Returns:
        Ecnumbasis string (starts with "z")

    Raises:
        KeyDecodeError: If the material value cannot yield key bytes
        EcnumbasisCreationError: If the key is not 32 bytes long

    Example:
        >>> create_multibase_ecnumbasis(material)
        'z6MkqRYqQiSgvZQdnBytw86Qbs2ZWUkGv22od935YF4s8M7V'
    """
    key = material.decoded_key()
    validate_key_length(key)

    ecnumbasis = multibase.encode(wrap(material.type.codec, key), "base58btc")
    LOGGER.debug(f"Encoded {material.type.codec.value} key as {ecnumbasis}")
    return ecnumbasis


def decode_multibase_ecnumbasis(
    ecnumbasis: str, format: VerificationMaterialFormat
) -> Tuple[str, VerificationMaterial]:
    """Decode an ecnumbasis into verification material.

    The format is chosen by the caller; it is not recorded in the ecnumbasis.

    Args:
        ecnumbasis: Multibase encoded, multicodec-prefixed key
        format: Format of the returned material

    Returns:
        Tuple of (multibase prefix character, material)

    Raises:
        UnsupportedBaseError: If the leading character names no known base
        UnknownCodecError: If the multicodec prefix is not Ed25519 or X25519
        EcnumbasisCreationError: If the body cannot be decoded or the key is
            not 32 bytes long
    """
    if not ecnumbasis:
        raise UnsupportedBaseError("Empty ecnumbasis has no multibase prefix")

    try:
        base = multibase.from_str(ecnumbasis)
    except KeyError as err:
        raise UnsupportedBaseError(
            f"Unsupported multibase prefix: {ecnumbasis[0]!r}"
        ) from err

    try:
        prefixed = multibase.decode(ecnumbasis)
    except Exception as err:
        raise EcnumbasisCreationError(
            f"Could not decode {base.name} ecnumbasis: {err}", derived_error=err
        ) from err

    codec, key = unwrap(prefixed)
    validate_key_length(key)

    material = VerificationMaterial.from_key(key, material_type_for(format, codec))
    LOGGER.debug(f"Decoded {base.name} ecnumbasis as {material.type}")
    return base.code, material

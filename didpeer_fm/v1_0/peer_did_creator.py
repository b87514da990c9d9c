"""Create did:peer identifiers with numalgo 0 and numalgo 2."""

import logging
from typing import Optional, Sequence

from .ecnumbasis import create_multibase_ecnumbasis
from .key_types import KeyPurpose
from .models import Service, VerificationMaterial
from .peer_did import PeerDID, PeerDIDAlgo
from .service_codec import encode_peer_did_services

LOGGER = logging.getLogger(__name__)

AGREEMENT_PREFIX = "E"
AUTHENTICATION_PREFIX = "V"


def _check_purpose(keys: Sequence[VerificationMaterial], purpose: KeyPurpose):
    for key in keys:
        if key.purpose is not purpose:
            raise ValueError(
                f"Expected {purpose.value} key, got {key.purpose.value} "
                f"({key.type.method_type.value})"
            )


def create_peer_did_numalgo_0(inception_key: VerificationMaterial) -> PeerDID:
    """Create a numalgo 0 did:peer from a single inception key.

    Args:
        inception_key: Ed25519 or X25519 verification material

    Returns:
        PeerDID whose method id is "0" followed by the key's ecnumbasis

    Example:
        >>> str(create_peer_did_numalgo_0(key))
        'did:peer:0z6MkqRYqQiSgvZQdnBytw86Qbs2ZWUkGv22od935YF4s8M7V'
    """
    method_id = (
        PeerDIDAlgo.INCEPTION_KEY_WITHOUT_DOC.value
        + create_multibase_ecnumbasis(inception_key)
    )
    LOGGER.debug(f"Created did:peer:{method_id}")
    return PeerDID(algo=PeerDIDAlgo.INCEPTION_KEY_WITHOUT_DOC, method_id=method_id)


def create_peer_did_numalgo_2(
    encryption_keys: Sequence[VerificationMaterial],
    signing_keys: Sequence[VerificationMaterial],
    services: Optional[Sequence[Service]] = None,
) -> PeerDID:
    """Create a numalgo 2 did:peer from several keys and services.

    Segments are joined with "." in this order: "2", one "E" segment per
    key agreement key, one "V" segment per authentication key, then the
    optional "S" service block.

    Args:
        encryption_keys: X25519 key agreement keys
        signing_keys: Ed25519 authentication keys
        services: Services to embed (optional)

    Returns:
        PeerDID with numalgo 2

    Raises:
        ValueError: If a key is listed under the wrong purpose
        KeyDecodeError: If a key value cannot be decoded
        EcnumbasisCreationError: If a key is not 32 bytes long
        EncodingError: If the services cannot be serialized
    """
    _check_purpose(encryption_keys, KeyPurpose.KEY_AGREEMENT)
    _check_purpose(signing_keys, KeyPurpose.AUTHENTICATION)

    segments = [PeerDIDAlgo.MULTIPLE_INCEPTION_KEYS.value]
    segments.extend(
        AGREEMENT_PREFIX + create_multibase_ecnumbasis(key) for key in encryption_keys
    )
    segments.extend(
        AUTHENTICATION_PREFIX + create_multibase_ecnumbasis(key)
        for key in signing_keys
    )

    encoded_services = encode_peer_did_services(services or [])
    if encoded_services:
        segments.append(encoded_services)

    method_id = ".".join(segments)
    LOGGER.debug(
        f"Created did:peer:2 with {len(encryption_keys)} agreement key(s), "
        f"{len(signing_keys)} authentication key(s), "
        f"{len(services or [])} service(s)"
    )
    return PeerDID(algo=PeerDIDAlgo.MULTIPLE_INCEPTION_KEYS, method_id=method_id)

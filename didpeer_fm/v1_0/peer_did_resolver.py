"""Resolve numalgo 0 and numalgo 2 did:peer identifiers into DID documents."""

import logging
from typing import List, Optional, Pattern

from .config import PeerDIDConfig
from .ecnumbasis import decode_multibase_ecnumbasis
from .errors import InvalidPeerDIDError
from .key_types import KeyPurpose, VerificationMaterialFormat
from .models import DIDDocument, Service, VerificationMethod
from .peer_did import PEER_DID_PATTERN, PeerDID, PeerDIDAlgo
from .peer_did_creator import AGREEMENT_PREFIX, AUTHENTICATION_PREFIX
from .service_codec import SERVICE_PREFIX, decode_peer_did_services

LOGGER = logging.getLogger(__name__)

SEGMENT_PURPOSES = {
    AGREEMENT_PREFIX: KeyPurpose.KEY_AGREEMENT,
    AUTHENTICATION_PREFIX: KeyPurpose.AUTHENTICATION,
}

# Segments must appear in this order: E*, V*, S?
SEGMENT_ORDER = (AGREEMENT_PREFIX, AUTHENTICATION_PREFIX, SERVICE_PREFIX)


def _verification_method(
    did: str, ecnumbasis: str, format: VerificationMaterialFormat
) -> VerificationMethod:
    _, material = decode_multibase_ecnumbasis(ecnumbasis, format)
    return VerificationMethod.from_ecnumbasis(did, ecnumbasis, material)


def _resolve_numalgo_0(
    peer_did: PeerDID, format: VerificationMaterialFormat
) -> DIDDocument:
    ecnumbasis = peer_did.method_id[1:]
    if not ecnumbasis:
        raise InvalidPeerDIDError(f"{peer_did} has no inception key")

    method = _verification_method(peer_did.did, ecnumbasis, format)
    return DIDDocument(did=peer_did.did, verification_methods=[method], services=[])


def _resolve_numalgo_2(
    peer_did: PeerDID, format: VerificationMaterialFormat
) -> DIDDocument:
    did = peer_did.did
    algo, *segments = peer_did.method_id.split(".")
    if algo != PeerDIDAlgo.MULTIPLE_INCEPTION_KEYS.value:
        raise InvalidPeerDIDError(f"Malformed numalgo 2 method id in {did}")

    methods: List[VerificationMethod] = []
    services: List[Service] = []
    position = 0
    for segment in segments:
        prefix, value = segment[:1], segment[1:]
        if prefix not in SEGMENT_ORDER or not value:
            raise InvalidPeerDIDError(f"Malformed segment {segment!r} in {did}")

        order = SEGMENT_ORDER.index(prefix)
        if order < position or (prefix == SERVICE_PREFIX and services):
            raise InvalidPeerDIDError(f"Segment {segment!r} is out of order in {did}")
        position = order

        if prefix == SERVICE_PREFIX:
            services = decode_peer_did_services(did, value)
            if not services:
                raise InvalidPeerDIDError(f"Empty service segment in {did}")
            continue

        method = _verification_method(did, value, format)
        if method.material.purpose is not SEGMENT_PURPOSES[prefix]:
            raise InvalidPeerDIDError(
                f"Segment {segment!r} holds a {method.material.type.codec.value} key, "
                f"which cannot be used for {SEGMENT_PURPOSES[prefix].value}"
            )
        methods.append(method)

    return DIDDocument(did=did, verification_methods=methods, services=services)


def resolve_peer_did(
    peer_did: str,
    format: VerificationMaterialFormat = VerificationMaterialFormat.MULTIBASE,
) -> DIDDocument:
    """Resolve a did:peer identifier.

    Args:
        peer_did: Numalgo 0 or numalgo 2 did:peer identifier
        format: Format of the verification material in the document

    Returns:
        DIDDocument

    Raises:
        InvalidPeerDIDError: If the identifier is empty or malformed
        UnsupportedBaseError: If a key uses an unknown multibase
        UnknownCodecError: If a key uses an unknown multicodec
        EcnumbasisCreationError: If a key cannot be decoded
        InvalidServiceError: If the service block cannot be decoded
    """
    parsed = PeerDID.from_string(peer_did)

    if parsed.algo is PeerDIDAlgo.INCEPTION_KEY_WITHOUT_DOC:
        return _resolve_numalgo_0(parsed, format)
    if parsed.algo is PeerDIDAlgo.MULTIPLE_INCEPTION_KEYS:
        return _resolve_numalgo_2(parsed, format)
    raise InvalidPeerDIDError(f"Unsupported numalgo {parsed.algo}")


class PeerDIDResolver:
    """Resolver for numalgo 0 and numalgo 2 did:peer DIDs."""

    def __init__(self, config: Optional[PeerDIDConfig] = None):
        """Initialize did:peer resolver."""
        self.config = config or PeerDIDConfig()

    @property
    def supported_did_regex(self) -> Pattern:
        """Return supported_did_regex for did:peer numalgo 0 and 2."""
        return PEER_DID_PATTERN

    def supports(self, did: str) -> bool:
        return bool(self.supported_did_regex.match(did))

    def resolve(
        self, did: str, format: Optional[VerificationMaterialFormat] = None
    ) -> DIDDocument:
        """Resolve did, using the configured format unless one is given."""
        format = format or self.config.default_format
        document = resolve_peer_did(did, format)
        if self.config.log_operations:
            LOGGER.info(
                f"Resolved {did} with {len(document.verification_methods)} "
                f"verification method(s) and {len(document.services)} service(s)"
            )
        return document

"""didpeer_fm - did:peer numalgo 0 and numalgo 2 for Python.

Builds peer DIDs from Ed25519/X25519 keys and DIDComm services, and
resolves them back into DID documents.
"""

from .v1_0.errors import (
    EcnumbasisCreationError,
    EncodingError,
    InvalidKeySizeError,
    InvalidPeerDIDError,
    InvalidServiceError,
    KeyDecodeError,
    PeerDIDError,
    UnknownCodecError,
    UnsupportedBaseError,
)
from .v1_0.key_types import (
    KeyPurpose,
    VerificationMaterialFormat,
    VerificationMaterialType,
    VerificationMethodType,
)
from .v1_0.models import DIDDocument, Service, VerificationMaterial, VerificationMethod
from .v1_0.peer_did import PeerDID, PeerDIDAlgo
from .v1_0.peer_did_creator import create_peer_did_numalgo_0, create_peer_did_numalgo_2
from .v1_0.peer_did_resolver import PeerDIDResolver, resolve_peer_did

__version__ = "0.1.0"
__author__ = "Ferris Menzel"

__all__ = [
    "DIDDocument",
    "EcnumbasisCreationError",
    "EncodingError",
    "InvalidKeySizeError",
    "InvalidPeerDIDError",
    "InvalidServiceError",
    "KeyDecodeError",
    "KeyPurpose",
    "PeerDID",
    "PeerDIDAlgo",
    "PeerDIDError",
    "PeerDIDResolver",
    "Service",
    "UnknownCodecError",
    "UnsupportedBaseError",
    "VerificationMaterial",
    "VerificationMaterialFormat",
    "VerificationMaterialType",
    "VerificationMethod",
    "VerificationMethodType",
    "create_peer_did_numalgo_0",
    "create_peer_did_numalgo_2",
    "resolve_peer_did",
]

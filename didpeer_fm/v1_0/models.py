"""DID document model populated by the did:peer resolver."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import base58
from multiformats import multibase
from pydid import deserialize_document

from .errors import KeyDecodeError, UnknownCodecError
from .key_types import KeyPurpose, VerificationMaterialFormat, VerificationMaterialType
from .multicodec import KeyCodec, unwrap, wrap
from .utils import b64url_decode, b64url_encode

LOGGER = logging.getLogger(__name__)

DID_V1_CONTEXT = "https://www.w3.org/ns/did/v1"

JWK_CURVES = {
    KeyCodec.ED25519: "Ed25519",
    KeyCodec.X25519: "X25519",
}


@dataclass(frozen=True)
class VerificationMaterial:
    """Public key value plus its purpose and representation.

    ``value`` is a JWK dict for the jwk format, the base58 text of the raw
    key for base58, and the multibase text of the multicodec-prefixed key
    for multibase.

    Instances are immutable but not hashable, since a JWK value is a dict.
    """

    format: VerificationMaterialFormat
    value: Union[str, Dict[str, str]]
    type: VerificationMaterialType

    __hash__ = None

    def __post_init__(self):
        if self.format is not self.type.format:
            raise ValueError(
                f"{self.type.method_type.value} requires {self.type.format.value} "
                f"format, got {self.format.value}"
            )

    @classmethod
    def from_key(
        cls, key: bytes, type: VerificationMaterialType
    ) -> "VerificationMaterial":
        """Build material from raw key bytes, inferring the format from the type.

        Args:
            key: Raw public key bytes
            type: Purpose and verification method type of the key

        Returns:
            VerificationMaterial holding the key in the type's format
        """
        format = type.format
        if format is VerificationMaterialFormat.JWK:
            value = {
                "kty": "OKP",
                "crv": JWK_CURVES[type.codec],
                "x": b64url_encode(key),
            }
        elif format is VerificationMaterialFormat.BASE58:
            value = base58.b58encode(key).decode()
        else:
            value = multibase.encode(wrap(type.codec, key), "base58btc")
        return cls(format=format, value=value, type=type)

    @property
    def purpose(self) -> KeyPurpose:
        return self.type.purpose

    def decoded_key(self) -> bytes:
        """Return the raw public key bytes held by this material.

        Raises:
            KeyDecodeError: If the value is malformed for its format
        """
        if self.format is VerificationMaterialFormat.JWK:
            return self._decode_jwk()
        if self.format is VerificationMaterialFormat.BASE58:
            if not isinstance(self.value, str):
                raise KeyDecodeError("Base58 key value must be a string")
            try:
                return base58.b58decode(self.value)
            except ValueError as err:
                raise KeyDecodeError(f"Invalid base58 key value: {err}") from err
        return self._decode_multibase()

    def _decode_jwk(self) -> bytes:
        if not isinstance(self.value, dict):
            raise KeyDecodeError("JWK key value must be an object")
        expected_curve = JWK_CURVES[self.type.codec]
        if self.value.get("kty") != "OKP" or self.value.get("crv") != expected_curve:
            raise KeyDecodeError(
                f"JWK must be an OKP key on curve {expected_curve}"
            )
        x = self.value.get("x")
        if not isinstance(x, str):
            raise KeyDecodeError("JWK is missing the 'x' coordinate")
        try:
            return b64url_decode(x)
        except ValueError as err:
            raise KeyDecodeError(f"Invalid JWK 'x' value: {err}") from err

    def _decode_multibase(self) -> bytes:
        if not isinstance(self.value, str):
            raise KeyDecodeError("Multibase key value must be a string")
        try:
            prefixed = multibase.decode(self.value)
        except Exception as err:
            raise KeyDecodeError(f"Invalid multibase key value: {err}") from err
        try:
            codec, key = unwrap(prefixed)
        except UnknownCodecError as err:
            raise KeyDecodeError(str(err)) from err
        if codec is not self.type.codec:
            raise KeyDecodeError(
                f"Multibase key is {codec.value}, expected {self.type.codec.value}"
            )
        return key


@dataclass(frozen=True)
class VerificationMethod:
    """Verification method of a DID document."""

    id: str
    controller: str
    material: VerificationMaterial

    @classmethod
    def from_ecnumbasis(
        cls, did: str, ecnumbasis: str, material: VerificationMaterial
    ) -> "VerificationMethod":
        """Verification method whose fragment is the key's ecnumbasis."""
        return cls(id=f"{did}#{ecnumbasis}", controller=did, material=material)

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.material.type.method_type.value,
            "controller": self.controller,
            self.material.format.document_field: self.material.value,
        }


@dataclass(frozen=True)
class Service:
    """DID document service.

    ``routing_keys`` and ``accept`` are None when absent, which is not the
    same as an empty list.
    """

    id: str
    type: str
    service_endpoint: str
    routing_keys: Optional[List[str]] = None
    accept: Optional[List[str]] = None

    def serialize(self) -> Dict[str, Any]:
        service = {
            "id": self.id,
            "type": self.type,
            "serviceEndpoint": self.service_endpoint,
        }
        if self.routing_keys is not None:
            service["routingKeys"] = list(self.routing_keys)
        if self.accept is not None:
            service["accept"] = list(self.accept)
        return service


@dataclass(frozen=True)
class DIDDocument:
    """Resolved did:peer document."""

    did: str
    verification_methods: List[VerificationMethod] = field(default_factory=list)
    services: List[Service] = field(default_factory=list)

    @property
    def authentication(self) -> List[str]:
        return [
            method.id
            for method in self.verification_methods
            if method.material.purpose is KeyPurpose.AUTHENTICATION
        ]

    @property
    def key_agreement(self) -> List[str]:
        return [
            method.id
            for method in self.verification_methods
            if method.material.purpose is KeyPurpose.KEY_AGREEMENT
        ]

    def serialize(self) -> Dict[str, Any]:
        """Serialize to a W3C DID document dict."""
        document = {"@context": [DID_V1_CONTEXT], "id": self.did}
        if self.verification_methods:
            document["verificationMethod"] = [
                method.serialize() for method in self.verification_methods
            ]
        if self.authentication:
            document["authentication"] = self.authentication
        if self.key_agreement:
            document["keyAgreement"] = self.key_agreement
        if self.services:
            document["service"] = [service.serialize() for service in self.services]
        return document

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.serialize(), indent=indent)

    def to_pydid(self):
        """Convert to a pydid document.

        Returns a ``pydid.DIDDocument``, or a ``pydid.NonconformantDocument``
        when pydid rejects part of the document.
        """
        LOGGER.debug(f"Converting {self.did} to pydid document")
        return deserialize_document(self.serialize())

"""Verification material types for did:peer numalgo 0 and numalgo 2.

A verification material type is a key purpose (authentication or key
agreement) paired with the verification method type used to publish it.
The method type fixes the textual format of the key value.
"""

from dataclasses import dataclass
from enum import Enum

from .multicodec import KeyCodec


class VerificationMaterialFormat(Enum):
    """Textual representation of a public key in a DID document."""

    JWK = "jwk"
    BASE58 = "base58"
    MULTIBASE = "multibase"

    @property
    def document_field(self) -> str:
        """Verification method property holding a value in this format."""
        return DOCUMENT_FIELDS[self]


DOCUMENT_FIELDS = {
    VerificationMaterialFormat.JWK: "publicKeyJwk",
    VerificationMaterialFormat.BASE58: "publicKeyBase58",
    VerificationMaterialFormat.MULTIBASE: "publicKeyMultibase",
}


class VerificationMethodType(Enum):
    """Verification method types a peer DID document can use."""

    JSON_WEB_KEY_2020 = "JsonWebKey2020"
    X25519_KEY_AGREEMENT_KEY_2019 = "X25519KeyAgreementKey2019"
    ED25519_VERIFICATION_KEY_2018 = "Ed25519VerificationKey2018"
    X25519_KEY_AGREEMENT_KEY_2020 = "X25519KeyAgreementKey2020"
    ED25519_VERIFICATION_KEY_2020 = "Ed25519VerificationKey2020"

    @property
    def format(self) -> VerificationMaterialFormat:
        """Format implied by this method type."""
        if self is VerificationMethodType.JSON_WEB_KEY_2020:
            return VerificationMaterialFormat.JWK
        if self in (
            VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2019,
            VerificationMethodType.ED25519_VERIFICATION_KEY_2018,
        ):
            return VerificationMaterialFormat.BASE58
        return VerificationMaterialFormat.MULTIBASE


class KeyPurpose(Enum):
    """Verification relationship of a key."""

    AUTHENTICATION = "authentication"
    KEY_AGREEMENT = "keyAgreement"

    @property
    def codec(self) -> KeyCodec:
        """Key kind used for this purpose."""
        if self is KeyPurpose.AUTHENTICATION:
            return KeyCodec.ED25519
        return KeyCodec.X25519


@dataclass(frozen=True)
class VerificationMaterialType:
    """Key purpose paired with a verification method type."""

    purpose: KeyPurpose
    method_type: VerificationMethodType

    def __post_init__(self):
        """Reject method types that cannot carry a key for this purpose."""
        if self.method_type not in METHOD_TYPES_BY_PURPOSE[self.purpose]:
            raise ValueError(
                f"{self.method_type.value} cannot be used for {self.purpose.value}"
            )

    @property
    def codec(self) -> KeyCodec:
        return self.purpose.codec

    @property
    def format(self) -> VerificationMaterialFormat:
        return self.method_type.format

    @classmethod
    def authentication(cls, method_type: VerificationMethodType):
        return cls(KeyPurpose.AUTHENTICATION, method_type)

    @classmethod
    def agreement(cls, method_type: VerificationMethodType):
        return cls(KeyPurpose.KEY_AGREEMENT, method_type)


METHOD_TYPES_BY_PURPOSE = {
    KeyPurpose.AUTHENTICATION: (
        VerificationMethodType.JSON_WEB_KEY_2020,
        VerificationMethodType.ED25519_VERIFICATION_KEY_2018,
        VerificationMethodType.ED25519_VERIFICATION_KEY_2020,
    ),
    KeyPurpose.KEY_AGREEMENT: (
        VerificationMethodType.JSON_WEB_KEY_2020,
        VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2019,
        VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2020,
    ),
}


# (format, key kind) --> material type produced when decoding an ecnumbasis.
# Must cover every combination of VerificationMaterialFormat and KeyCodec.
MATERIAL_TYPES = {
    (VerificationMaterialFormat.JWK, KeyCodec.X25519):
        VerificationMaterialType.agreement(VerificationMethodType.JSON_WEB_KEY_2020),
    (VerificationMaterialFormat.JWK, KeyCodec.ED25519):
        VerificationMaterialType.authentication(VerificationMethodType.JSON_WEB_KEY_2020),
    (VerificationMaterialFormat.BASE58, KeyCodec.X25519):
        VerificationMaterialType.agreement(
            VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2019
        ),
    (VerificationMaterialFormat.BASE58, KeyCodec.ED25519):
        VerificationMaterialType.authentication(
            VerificationMethodType.ED25519_VERIFICATION_KEY_2018
        ),
    (VerificationMaterialFormat.MULTIBASE, KeyCodec.X25519):
        VerificationMaterialType.agreement(
            VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2020
        ),
    (VerificationMaterialFormat.MULTIBASE, KeyCodec.ED25519):
        VerificationMaterialType.authentication(
            VerificationMethodType.ED25519_VERIFICATION_KEY_2020
        ),
}


def material_type_for(
    format: VerificationMaterialFormat, codec: KeyCodec
) -> VerificationMaterialType:
    """Look up the material type for a decoded key in the requested format."""
    return MATERIAL_TYPES[(format, codec)]

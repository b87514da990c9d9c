"""Tests for the ecnumbasis codec."""

from itertools import product

import base58
import pytest
from multiformats import multibase

from ..ecnumbasis import create_multibase_ecnumbasis, decode_multibase_ecnumbasis
from ..errors import (
    EcnumbasisCreationError,
    InvalidKeySizeError,
    KeyDecodeError,
    UnknownCodecError,
    UnsupportedBaseError,
)
from ..key_types import (
    VerificationMaterialFormat,
    VerificationMaterialType,
    VerificationMethodType,
    material_type_for,
)
from ..models import VerificationMaterial
from ..multicodec import KeyCodec, wrap
from .vectors import (
    ED25519_KEY_BASE58,
    ED25519_KEY_ECNUMBASIS,
    X25519_KEY_BASE58,
    X25519_KEY_ECNUMBASIS,
    ZERO_ED25519_ECNUMBASIS,
    ZERO_KEY,
)

KEYS = {
    KeyCodec.ED25519: base58.b58decode(ED25519_KEY_BASE58),
    KeyCodec.X25519: base58.b58decode(X25519_KEY_BASE58),
}


class TestCreateEcnumbasis:
    """Test encoding verification material."""

    def test_ed25519_base58(self):
        """Test known Ed25519 key."""
        material = VerificationMaterial(
            format=VerificationMaterialFormat.BASE58,
            value=ED25519_KEY_BASE58,
            type=VerificationMaterialType.authentication(
                VerificationMethodType.ED25519_VERIFICATION_KEY_2018
            ),
        )
        assert create_multibase_ecnumbasis(material) == ED25519_KEY_ECNUMBASIS

    def test_x25519_base58(self):
        """Test known X25519 key."""
        material = VerificationMaterial(
            format=VerificationMaterialFormat.BASE58,
            value=X25519_KEY_BASE58,
            type=VerificationMaterialType.agreement(
                VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2019
            ),
        )
        assert create_multibase_ecnumbasis(material) == X25519_KEY_ECNUMBASIS

    def test_zero_key(self):
        """Test 32 zero bytes as an Ed25519 multibase key."""
        material = VerificationMaterial.from_key(
            ZERO_KEY,
            VerificationMaterialType.authentication(
                VerificationMethodType.ED25519_VERIFICATION_KEY_2020
            ),
        )
        ecnumbasis = create_multibase_ecnumbasis(material)

        assert ecnumbasis.startswith("z")
        assert ecnumbasis == ZERO_ED25519_ECNUMBASIS

    def test_undecodable_material(self):
        """Test material that yields no key bytes."""
        material = VerificationMaterial(
            format=VerificationMaterialFormat.BASE58,
            value="not base58!",
            type=VerificationMaterialType.authentication(
                VerificationMethodType.ED25519_VERIFICATION_KEY_2018
            ),
        )
        with pytest.raises(KeyDecodeError):
            create_multibase_ecnumbasis(material)

    @pytest.mark.parametrize("size", [0, 31, 33, 64])
    def test_wrong_key_size(self, size):
        """Test key length other than 32 bytes."""
        material = VerificationMaterial.from_key(
            bytes(size),
            VerificationMaterialType.agreement(
                VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2020
            ),
        )
        with pytest.raises(EcnumbasisCreationError) as exc_info:
            create_multibase_ecnumbasis(material)
        assert isinstance(exc_info.value.derived_error, InvalidKeySizeError)


class TestDecodeEcnumbasis:
    """Test decoding ecnumbasis strings."""

    @pytest.mark.parametrize(
        "format,codec", list(product(VerificationMaterialFormat, KeyCodec))
    )
    def test_round_trip(self, format, codec):
        """Test every format/codec entry recovers the key bytes and kind."""
        source = VerificationMaterial.from_key(
            KEYS[codec], material_type_for(VerificationMaterialFormat.BASE58, codec)
        )
        ecnumbasis = create_multibase_ecnumbasis(source)

        base, material = decode_multibase_ecnumbasis(ecnumbasis, format)

        assert base == "z"
        assert material.format is format
        assert material.type == material_type_for(format, codec)
        assert material.type.codec is codec
        assert material.decoded_key() == KEYS[codec]

    def test_known_values(self):
        """Test decoding known ecnumbasis strings."""
        _, material = decode_multibase_ecnumbasis(
            ED25519_KEY_ECNUMBASIS, VerificationMaterialFormat.BASE58
        )
        assert material.value == ED25519_KEY_BASE58
        assert material.type.method_type is VerificationMethodType.ED25519_VERIFICATION_KEY_2018

        _, material = decode_multibase_ecnumbasis(
            X25519_KEY_ECNUMBASIS, VerificationMaterialFormat.MULTIBASE
        )
        assert material.value == X25519_KEY_ECNUMBASIS
        assert material.type.method_type is VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2020

    def test_other_base(self):
        """Test the base is detected from the prefix character."""
        ecnumbasis = multibase.encode(
            wrap(KeyCodec.ED25519, KEYS[KeyCodec.ED25519]), "base64url"
        )

        base, material = decode_multibase_ecnumbasis(
            ecnumbasis, VerificationMaterialFormat.BASE58
        )

        assert base == "u"
        assert material.value == ED25519_KEY_BASE58

    @pytest.mark.parametrize("ecnumbasis", ["", "*6MkqRYqQiSgvZQdnBytw86Qbs2ZWUkGv22od935YF4s8M7V"])
    def test_unsupported_base(self, ecnumbasis):
        """Test unknown base prefix."""
        with pytest.raises(UnsupportedBaseError):
            decode_multibase_ecnumbasis(ecnumbasis, VerificationMaterialFormat.MULTIBASE)

    def test_invalid_base_body(self):
        """Test characters outside the base58btc alphabet."""
        with pytest.raises(EcnumbasisCreationError):
            decode_multibase_ecnumbasis("z0OIl", VerificationMaterialFormat.MULTIBASE)

    def test_unknown_codec(self):
        """Test unknown multicodec prefix."""
        ecnumbasis = multibase.encode(b"\x12\x00" + bytes(32), "base58btc")
        with pytest.raises(UnknownCodecError):
            decode_multibase_ecnumbasis(ecnumbasis, VerificationMaterialFormat.JWK)

    @pytest.mark.parametrize(
        "codec,size,base",
        [
            (KeyCodec.ED25519, 31, "base58btc"),
            (KeyCodec.ED25519, 33, "base58btc"),
            (KeyCodec.X25519, 31, "base58btc"),
            (KeyCodec.X25519, 33, "base64url"),
            (KeyCodec.X25519, 0, "base16"),
        ],
    )
    def test_wrong_key_size(self, codec, size, base):
        """Test key length other than 32 bytes fails for every base and codec."""
        ecnumbasis = multibase.encode(wrap(codec, bytes([1]) * size), base)

        with pytest.raises(EcnumbasisCreationError) as exc_info:
            decode_multibase_ecnumbasis(ecnumbasis, VerificationMaterialFormat.MULTIBASE)

        assert isinstance(exc_info.value.derived_error, InvalidKeySizeError)
        assert isinstance(exc_info.value.__cause__, InvalidKeySizeError)

"""Tests for the didpeer command line."""

import json

import pytest

from ..cli import main
from .vectors import (
    ED25519_KEY_BASE58,
    ED25519_KEY_ECNUMBASIS,
    X25519_KEY_BASE58,
    X25519_KEY_ECNUMBASIS,
)


class TestCLI:
    """Test the didpeer command."""

    def test_create0(self, capsys):
        """Test creating a numalgo 0 DID."""
        assert main(["create0", ED25519_KEY_BASE58]) == 0
        assert capsys.readouterr().out.strip() == f"did:peer:0{ED25519_KEY_ECNUMBASIS}"

    def test_create0_key_agreement(self, capsys):
        """Test creating a numalgo 0 DID from an X25519 key."""
        assert main(["create0", X25519_KEY_BASE58, "--purpose", "keyAgreement"]) == 0
        assert capsys.readouterr().out.strip() == f"did:peer:0{X25519_KEY_ECNUMBASIS}"

    def test_create2_and_resolve(self, capsys):
        """Test creating a numalgo 2 DID and resolving it."""
        assert main([
            "create2",
            "--agreement", X25519_KEY_BASE58,
            "--authentication", ED25519_KEY_BASE58,
            "--endpoint", "https://example.com/endpoint",
            "--accept", "didcomm/v2",
        ]) == 0
        did = capsys.readouterr().out.strip()
        assert did.startswith(f"did:peer:2.E{X25519_KEY_ECNUMBASIS}.V{ED25519_KEY_ECNUMBASIS}.S")

        assert main(["resolve", did, "--format", "base58"]) == 0
        document = json.loads(capsys.readouterr().out)

        assert document["id"] == did
        assert [vm["publicKeyBase58"] for vm in document["verificationMethod"]] == [
            X25519_KEY_BASE58,
            ED25519_KEY_BASE58,
        ]
        assert document["service"] == [{
            "id": f"{did}#didcommmessaging-1",
            "type": "DIDCommMessaging",
            "serviceEndpoint": "https://example.com/endpoint",
            "accept": ["didcomm/v2"],
        }]

    def test_resolve_invalid(self, capsys):
        """Test errors are reported with exit code 1."""
        assert main(["resolve", "did:peer:1zQmZMygzYqNwU6Uhmewx5Xepf2VLp5S4HLSwwgf2aiKZuwa"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_command(self):
        """Test a command is required."""
        with pytest.raises(SystemExit):
            main([])

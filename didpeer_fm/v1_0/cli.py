"""Command line interface for creating and resolving did:peer identifiers.

Usage:
    didpeer resolve did:peer:0z6Mk... --format jwk
    didpeer create0 <base58 Ed25519 key>
    didpeer create2 --agreement <b58 X25519 key> --authentication <b58 Ed25519 key> \
        --endpoint https://example.com/endpoint --accept didcomm/v2
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import PeerDIDError
from .key_types import (
    KeyPurpose,
    VerificationMaterialFormat,
    VerificationMaterialType,
    VerificationMethodType,
)
from .models import Service, VerificationMaterial
from .peer_did_creator import create_peer_did_numalgo_0, create_peer_did_numalgo_2
from .peer_did_resolver import resolve_peer_did

LOGGER = logging.getLogger(__name__)

BASE58_TYPES = {
    KeyPurpose.AUTHENTICATION: VerificationMaterialType.authentication(
        VerificationMethodType.ED25519_VERIFICATION_KEY_2018
    ),
    KeyPurpose.KEY_AGREEMENT: VerificationMaterialType.agreement(
        VerificationMethodType.X25519_KEY_AGREEMENT_KEY_2019
    ),
}


def _base58_material(value: str, purpose: KeyPurpose) -> VerificationMaterial:
    return VerificationMaterial(
        format=VerificationMaterialFormat.BASE58,
        value=value,
        type=BASE58_TYPES[purpose],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="didpeer",
        description="Create and resolve did:peer numalgo 0 and numalgo 2 DIDs",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Resolve a did:peer DID")
    resolve.add_argument("did", help="did:peer DID to resolve")
    resolve.add_argument(
        "--format",
        choices=[fmt.value for fmt in VerificationMaterialFormat],
        default=VerificationMaterialFormat.MULTIBASE.value,
        help="Verification material format (default: multibase)"
    )

    create0 = commands.add_parser("create0", help="Create a numalgo 0 DID")
    create0.add_argument("key", help="Base58 encoded public key")
    create0.add_argument(
        "--purpose",
        choices=[purpose.value for purpose in KeyPurpose],
        default=KeyPurpose.AUTHENTICATION.value,
        help="Key purpose (default: authentication, i.e. Ed25519)"
    )

    create2 = commands.add_parser("create2", help="Create a numalgo 2 DID")
    create2.add_argument(
        "--agreement",
        action="append",
        default=[],
        help="Base58 encoded X25519 key agreement key (repeatable)"
    )
    create2.add_argument(
        "--authentication",
        action="append",
        default=[],
        help="Base58 encoded Ed25519 authentication key (repeatable)"
    )
    create2.add_argument("--endpoint", help="DIDCommMessaging service endpoint")
    create2.add_argument(
        "--routing-key",
        action="append",
        dest="routing_keys",
        help="Routing key for the service (repeatable)"
    )
    create2.add_argument(
        "--accept",
        action="append",
        help="Accepted profile for the service (repeatable)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the didpeer command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "resolve":
            document = resolve_peer_did(
                args.did, VerificationMaterialFormat(args.format)
            )
            print(document.to_json(indent=2))
        elif args.command == "create0":
            key = _base58_material(args.key, KeyPurpose(args.purpose))
            print(create_peer_did_numalgo_0(key))
        else:
            services = []
            if args.endpoint:
                services.append(
                    Service(
                        id="#didcomm",
                        type="DIDCommMessaging",
                        service_endpoint=args.endpoint,
                        routing_keys=args.routing_keys,
                        accept=args.accept,
                    )
                )
            peer_did = create_peer_did_numalgo_2(
                encryption_keys=[
                    _base58_material(key, KeyPurpose.KEY_AGREEMENT)
                    for key in args.agreement
                ],
                signing_keys=[
                    _base58_material(key, KeyPurpose.AUTHENTICATION)
                    for key in args.authentication
                ],
                services=services,
            )
            print(peer_did)
    except PeerDIDError as err:
        LOGGER.error(f"{type(err).__name__}: {err}")
        print(f"Error: {err}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

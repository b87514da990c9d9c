"""did:peer identifier."""

import re
from dataclasses import dataclass
from enum import Enum

from pydid.did import DID, InvalidDIDError

from .errors import InvalidPeerDIDError

PEER_DID_PREFIX = "did:peer:"

# Long form numalgo 0 and numalgo 2 identifiers
PEER_DID_PATTERN = re.compile(
    r"^did:peer:(?:0z[1-9a-km-zA-HJ-NP-Z]+"
    r"|2(?:\.Ez[1-9a-km-zA-HJ-NP-Z]+)*(?:\.Vz[1-9a-km-zA-HJ-NP-Z]+)*"
    r"(?:\.S[A-Za-z0-9_-]+)?)$"
)


class PeerDIDAlgo(Enum):
    """Supported did:peer numalgo values."""

    INCEPTION_KEY_WITHOUT_DOC = "0"
    MULTIPLE_INCEPTION_KEYS = "2"


@dataclass(frozen=True)
class PeerDID:
    """did:peer identifier.

    ``method_id`` is everything after "did:peer:", including the numalgo digit.
    """

    algo: PeerDIDAlgo
    method_id: str

    @property
    def did(self) -> str:
        return PEER_DID_PREFIX + self.method_id

    def __str__(self) -> str:
        return self.did

    @classmethod
    def from_string(cls, did: str) -> "PeerDID":
        """Parse a did:peer identifier.

        Raises:
            InvalidPeerDIDError: If did is not a did:peer DID or uses a
                numalgo other than 0 or 2
        """
        if not did:
            raise InvalidPeerDIDError("Peer DID string is empty")

        try:
            parsed = DID(did)
        except InvalidDIDError as err:
            raise InvalidPeerDIDError(f"Invalid DID: {did}") from err

        if parsed.method != "peer":
            raise InvalidPeerDIDError(f"{did} is not a did:peer DID")

        method_id = parsed.method_specific_id
        try:
            algo = PeerDIDAlgo(method_id[:1])
        except ValueError as err:
            raise InvalidPeerDIDError(
                f"Unsupported did:peer numalgo {method_id[:1]!r} in {did}"
            ) from err

        return cls(algo=algo, method_id=method_id)

"""Compact service block codec for did:peer numalgo 2.

Services are written as abbreviated JSON records with the fields in the
order ``s, r, a, t``::

    {"s":"https://example.com/endpoint","r":["did:example:somemediator#somekey"],"a":["didcomm/v2"],"t":"dm"}

The compact JSON is base64url encoded without padding and prefixed with "S".
A single service is written as one record, several services as an array.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from .errors import EncodingError, InvalidServiceError
from .models import Service
from .utils import b64url_decode, b64url_encode

LOGGER = logging.getLogger(__name__)

SERVICE_PREFIX = "S"

# Service type --> abbreviation, applied to the "t" field only
SERVICE_TYPE_ABBREVIATIONS = {
    "DIDCommMessaging": "dm",
}
SERVICE_TYPE_EXPANSIONS = {
    abbreviation: service_type
    for service_type, abbreviation in SERVICE_TYPE_ABBREVIATIONS.items()
}


def abbreviate_service(service: Service) -> Dict[str, Any]:
    """Build the wire record for a service, keeping the field order s, r, a, t.

    Absent routing keys and accept lists are left out of the record.
    """
    record = {"s": service.service_endpoint}
    if service.routing_keys is not None:
        record["r"] = list(service.routing_keys)
    if service.accept is not None:
        record["a"] = list(service.accept)
    record["t"] = SERVICE_TYPE_ABBREVIATIONS.get(service.type, service.type)
    return record


def encode_peer_did_services(services: Sequence[Service]) -> Optional[str]:
    """Encode services as a compact numalgo 2 service block.

    Args:
        services: Services to encode; their ids are not encoded

    Returns:
        "S"-prefixed service block, or None if there are no services

    Raises:
        EncodingError: If a service cannot be serialized
    """
    if not services:
        return None

    records = [abbreviate_service(service) for service in services]
    payload = records[0] if len(records) == 1 else records

    try:
        compact = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise EncodingError(f"Could not serialize services: {err}") from err

    LOGGER.debug(f"Encoding {len(records)} service(s): {compact}")
    return SERVICE_PREFIX + b64url_encode(compact.encode("utf-8"))


def _expand_record(record: Any) -> Dict[str, Any]:
    """Validate one abbreviated record and expand its service type."""
    if not isinstance(record, dict):
        raise InvalidServiceError(f"Service record must be an object, got {record!r}")

    service_type = record.get("t")
    endpoint = record.get("s")
    if not isinstance(service_type, str) or not isinstance(endpoint, str):
        raise InvalidServiceError(
            "Service record requires string 't' and 's' fields"
        )

    expanded = {
        "type": SERVICE_TYPE_EXPANSIONS.get(service_type, service_type),
        "service_endpoint": endpoint,
    }
    for short, name in (("r", "routing_keys"), ("a", "accept")):
        value = record.get(short)
        if value is None:
            expanded[name] = None
        elif isinstance(value, list) and all(isinstance(item, str) for item in value):
            expanded[name] = value
        else:
            raise InvalidServiceError(
                f"Service record field '{short}' must be a list of strings"
            )
    return expanded


def _to_service(did: str, record: Dict[str, Any], index: int) -> Service:
    return Service(
        id=f"{did}#{record['type'].lower()}-{index}",
        **record,
    )


def decode_peer_did_services(did: str, service_str: str) -> List[Service]:
    """Decode a compact service block into DID document services.

    Service ids are ``{did}#{type in lowercase}-{n}``, where n counts from 1
    within each service type.

    Args:
        did: DID the services belong to
        service_str: Service block, with or without the "S" prefix

    Returns:
        Services grouped by type, in order of first appearance of each type

    Raises:
        InvalidServiceError: If the block is not valid base64url, UTF-8 or
            JSON, or holds neither a record nor an array of records
    """
    if service_str.startswith(SERVICE_PREFIX):
        service_str = service_str[len(SERVICE_PREFIX):]

    try:
        decoded = b64url_decode(service_str).decode("utf-8")
    except ValueError as err:
        raise InvalidServiceError(f"Invalid service encoding: {err}") from err

    try:
        payload = json.loads(decoded)
    except (ValueError, RecursionError) as err:
        raise InvalidServiceError(f"Service block is not valid JSON: {err}") from err

    if isinstance(payload, dict):
        return [_to_service(did, _expand_record(payload), 1)]

    if not isinstance(payload, list):
        raise InvalidServiceError(
            "Service block must hold a service record or a list of records"
        )

    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for record in payload:
        expanded = _expand_record(record)
        grouped.setdefault(expanded["type"], []).append(expanded)

    return [
        _to_service(did, record, index)
        for records in grouped.values()
        for index, record in enumerate(records, start=1)
    ]

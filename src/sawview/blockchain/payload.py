# File: src/sawview/blockchain/payload.py
"""Decoding of transaction payloads and state data.

Payloads are a key/value map serialized with a user chosen scheme and then
base64 encoded. Schemes are looked up by name in a ``SchemeRegistry`` so new
formats can be added without touching the decoder.
"""
import base64
import binascii
import io
import json
import logging
from typing import Any, Callable, Dict, List, Optional

import cbor2

from ..exceptions import (
    DeserializationFailedError,
    InvalidBase64Error,
    NotAnObjectError,
    SchemeNotImplementedError,
    UnsupportedSchemeError,
)

logger = logging.getLogger(__name__)

SchemeDecoder = Callable[[bytes], Any]

def decode_cbor(raw: bytes) -> Any:
    decoder = cbor2.CBORDecoder(io.BytesIO(raw))
    try:
        value = decoder.decode()
    except cbor2.CBORDecodeError as e:
        raise DeserializationFailedError("cbor", str(e))
    # A payload is exactly one item; anything after it is garbage.
    try:
        decoder.decode()
    except cbor2.CBORDecodeEOF:
        return value
    except cbor2.CBORDecodeError:
        pass
    raise DeserializationFailedError("cbor", "trailing data after payload")

def decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise DeserializationFailedError("json", str(e))

def decode_custom(raw: bytes) -> Any:
    raise SchemeNotImplementedError("custom")

class SchemeRegistry:
    def __init__(self):
        self._decoders: Dict[str, SchemeDecoder] = {}

    def register(self, name: str, decoder: SchemeDecoder) -> None:
        """Add or replace the decoder for a scheme"""
        self._decoders[name.lower()] = decoder

    def get(self, name: str) -> SchemeDecoder:
        try:
            return self._decoders[name.lower()]
        except KeyError:
            raise UnsupportedSchemeError(name)

    def names(self) -> List[str]:
        return sorted(self._decoders)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._decoders

def create_default_registry() -> SchemeRegistry:
    registry = SchemeRegistry()
    registry.register("cbor", decode_cbor)
    registry.register("json", decode_json)
    registry.register("custom", decode_custom)
    return registry

default_registry = create_default_registry()

def register_scheme(name: str, decoder: SchemeDecoder) -> None:
    default_registry.register(name, decoder)

def format_pairs(value: Any, indent: int = 0) -> str:
    """Render a map as one 'key : value' line per pair"""
    if not isinstance(value, dict):
        raise NotAnObjectError(
            f"Error in trying to convert deserialized payload to object: "
            f"got {type(value).__name__}"
        )
    padding = "\t" * indent
    return "".join(f"{padding}{key!r} : {val!r}\n" for key, val in value.items())

def decode(
    payload_base64: str,
    scheme: str,
    indent: int = 0,
    registry: Optional[SchemeRegistry] = None
) -> str:
    """Base64-decode a payload, deserialize it and format its key/value pairs.

    Pair order is whatever the scheme's deserializer yields; for ``cbor`` and
    ``json`` that is the encoded order.
    """
    decoder = (registry or default_registry).get(scheme)
    try:
        raw = base64.b64decode(payload_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidBase64Error(f"Error in trying to base64 decode payload: {e}")

    logger.debug("Decoding %d byte payload with %s", len(raw), scheme)
    return format_pairs(decoder(raw), indent)

class PayloadDecoder:
    """Decoder bound to one scheme, checked when it is created"""

    def __init__(self, scheme: str, registry: Optional[SchemeRegistry] = None):
        self.registry = registry or default_registry
        self.registry.get(scheme)
        self.scheme = scheme

    def decode(self, payload_base64: str, indent: int = 0) -> str:
        return decode(payload_base64, self.scheme, indent, self.registry)

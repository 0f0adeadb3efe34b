"""Shared wire field types for the Jupiter API schema.

The API encodes public keys as base58 strings, u64 amounts as decimal
strings and raw bytes as base64. These annotated types do the conversion
so models can hold native Python values.
"""

import base64
import binascii
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from solders.pubkey import Pubkey


def _parse_pubkey(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return Pubkey.from_string(value)
        except ValueError as e:
            raise ValueError(f"Invalid public key: {value!r}") from e
    return value


def _parse_u64(value: Any) -> Any:
    # Accept both "1000" and 1000, the API is not consistent between endpoints
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as e:
            raise ValueError(f"Invalid integer string: {value!r}") from e
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0 or value >= 2**64:
            raise ValueError(f"Value out of u64 range: {value}")
    return value


def _parse_base64(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError("Invalid base64 payload") from e
    return value


PubkeyField = Annotated[
    Pubkey,
    BeforeValidator(_parse_pubkey),
    PlainSerializer(str, return_type=str),
]

# u64 that travels as a decimal string
U64String = Annotated[
    int,
    BeforeValidator(_parse_u64),
    PlainSerializer(str, return_type=str),
]

Base64Bytes = Annotated[
    bytes,
    BeforeValidator(_parse_base64),
    PlainSerializer(lambda b: base64.b64encode(b).decode("ascii"), return_type=str),
]


class WireModel(BaseModel):
    """Base model for camelCase API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_wire(self) -> dict:
        """Dump to the JSON-compatible camelCase form sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

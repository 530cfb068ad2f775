"""
Core infrastructure components for DynamoDB item operations.

- credentials: static vs. Cognito identity pool credential resolution
- client_factory: boto3 DynamoDB resource creation and the ClientContext holder
- codec: PK/SK/JSON item encoding and decoding
"""

from .client_factory import ClientContext, ClientHandle, create_client_handle
from .codec import (
    JSON_ATTRIBUTE,
    PK_ATTRIBUTE,
    SK_ATTRIBUTE,
    build_key,
    decode_item,
    deserialize_value,
    encode_item,
    serialize_value,
)
from .credentials import (
    CognitoIdentityCredentials,
    StaticCredentials,
    resolve_credentials,
)

__all__ = [
    "ClientContext",
    "ClientHandle",
    "create_client_handle",
    "CognitoIdentityCredentials",
    "StaticCredentials",
    "resolve_credentials",
    "PK_ATTRIBUTE",
    "SK_ATTRIBUTE",
    "JSON_ATTRIBUTE",
    "build_key",
    "encode_item",
    "decode_item",
    "serialize_value",
    "deserialize_value",
]

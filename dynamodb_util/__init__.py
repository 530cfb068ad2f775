from .config import DynamoDBConfig
from .exceptions import (
    ConfigurationError,
    ConnectionError,
    DecodeError,
    DynamoDBUtilError,
    NotInitializedError,
    ValidationError,
)
from .core import (
    # Client lifecycle
    ClientContext,
    ClientHandle,
    create_client_handle,
    # Credentials
    CognitoIdentityCredentials,
    StaticCredentials,
    resolve_credentials,
    # Item codec
    build_key,
    decode_item,
    encode_item,
)
from .handlers import ItemReadApi, ItemWriteApi
from .store import (
    default_context,
    delete_item,
    get,
    init,
    put,
    query_items,
    scan_table,
    update_item,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "ConfigurationError",
    "ConnectionError",
    "DecodeError",
    "DynamoDBUtilError",
    "NotInitializedError",
    "ValidationError",

    # Client lifecycle
    "ClientContext",
    "ClientHandle",
    "create_client_handle",
    "CognitoIdentityCredentials",
    "StaticCredentials",
    "resolve_credentials",

    # Item codec
    "build_key",
    "encode_item",
    "decode_item",

    # Read/write APIs
    "ItemReadApi",
    "ItemWriteApi",

    # Process-wide convenience API
    "default_context",
    "init",
    "get",
    "put",
    "update_item",
    "delete_item",
    "query_items",
    "scan_table",
]

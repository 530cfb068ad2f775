"""
Process-wide convenience API.

    import dynamodb_util

    dynamodb_util.init(region_name="eu-west-1")   # or rely on the environment
    dynamodb_util.put({"name": "A", "age": 1}, "K1")
    dynamodb_util.get("K1")   # {'PK': 'K1', 'JSON': {'name': 'A', 'age': 1}}

All functions share `default_context`. Call init() once, before concurrent
use; calling it again replaces the handle for subsequent calls.
"""

from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from .config import DynamoDBConfig
from .core import ClientContext, ClientHandle
from .handlers import ItemReadApi, ItemWriteApi

default_context = ClientContext()


def init(config: Optional[DynamoDBConfig] = None, **overrides) -> ClientHandle:
    """Initialize the process-wide DynamoDB handle.

    Args:
        config: Full configuration; environment defaults are used when omitted
        **overrides: DynamoDBConfig fields (region_name, identity_pool_id,
            aws_access_key_id, aws_secret_access_key, ...)
    """
    return default_context.initialize(config, **overrides)


def get(
    pk: Any,
    sk: Any = None,
    model_class: Optional[Type[BaseModel]] = None,
    consistent_read: bool = False
) -> Optional[Dict[str, Any]]:
    """Get and decode one item; None when it does not exist."""
    return ItemReadApi(default_context).get(pk, sk, model_class=model_class, consistent_read=consistent_read)


def put(value: Any, pk: Any, sk: Any = None) -> Dict[str, Any]:
    """Store a value under (pk, sk), replacing any existing item."""
    return ItemWriteApi(default_context).put(value, pk, sk)


def update_item(
    key: Dict[str, Any],
    update_expression: str,
    attribute_values: Optional[Dict[str, Any]] = None,
    **kwargs
) -> Dict[str, Any]:
    return ItemWriteApi(default_context).update_item(key, update_expression, attribute_values, **kwargs)


def delete_item(key: Dict[str, Any], **kwargs) -> Dict[str, Any]:
    return ItemWriteApi(default_context).delete_item(key, **kwargs)


def query_items(
    key_condition_expression,
    attribute_values: Optional[Dict[str, Any]] = None,
    **kwargs
) -> Tuple[List[Dict[str, Any]], Optional[dict]]:
    return ItemReadApi(default_context).query_items(key_condition_expression, attribute_values, **kwargs)


def scan_table(
    filter_expression=None,
    attribute_values: Optional[Dict[str, Any]] = None,
    **kwargs
) -> Tuple[List[Dict[str, Any]], Optional[dict]]:
    return ItemReadApi(default_context).scan_table(filter_expression, attribute_values, **kwargs)

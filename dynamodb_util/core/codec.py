"""
Item Codec

Maps application values onto the single-payload item shape:

    {"PK": <primary key>, "SK": <sort key, optional>, "JSON": "<serialized value>"}

Encoding serializes the value into the JSON attribute; decoding parses it
back in place and returns the whole item, key attributes included.

The sort key is omitted only when it is None. Falsy values such as 0 or ""
are real sort keys and are sent to DynamoDB as given.
"""

import json
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError, ValidationError

logger = logging.getLogger(__name__)

PK_ATTRIBUTE = "PK"
SK_ATTRIBUTE = "SK"
JSON_ATTRIBUTE = "JSON"


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC; naive datetimes are assumed to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _json_default(obj: Any) -> Any:
    """Serialize the non-JSON types that commonly show up in boto3 code."""
    if isinstance(obj, datetime):
        return to_utc(obj).isoformat()
    if isinstance(obj, Decimal):
        # boto3 hands numbers back as Decimal
        if not obj.is_finite():
            raise TypeError(f"Decimal {obj} has no JSON representation")
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def build_key(pk: Any, sk: Any = None) -> Dict[str, Any]:
    """Build the key attributes for an item.

    Args:
        pk: Primary key value
        sk: Sort key value, omitted from the key when None

    Returns:
        Key dictionary suitable for GetItem/UpdateItem/DeleteItem

    Raises:
        ValidationError: If no primary key value is given
    """
    if pk is None:
        raise ValidationError("Primary key value is required", {PK_ATTRIBUTE: "missing"})

    key = {PK_ATTRIBUTE: pk}
    if sk is not None:
        key[SK_ATTRIBUTE] = sk
    return key


def serialize_value(value: Any) -> str:
    """Serialize an application value into the JSON payload string."""
    try:
        return json.dumps(value, default=_json_default, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Value cannot be serialized to JSON: {e}", original_error=e) from e


def deserialize_value(payload: Any, key: Optional[Dict[str, Any]] = None) -> Any:
    """Parse a stored JSON payload.

    Raises:
        DecodeError: If the payload is not a string holding valid JSON
    """
    if not isinstance(payload, str):
        raise DecodeError(f"Stored {JSON_ATTRIBUTE} attribute is not a string: {type(payload).__name__}", key)
    try:
        return json.loads(payload)
    except ValueError as e:
        logger.error(f"Failed to decode {JSON_ATTRIBUTE} attribute for {key}: {e}")
        raise DecodeError(f"Stored {JSON_ATTRIBUTE} attribute is not valid JSON: {e}", key, e) from e


def encode_item(value: Any, pk: Any, sk: Any = None) -> Dict[str, Any]:
    """
    Encode a value into a storable item.

    Args:
        value: Any JSON-representable value (dicts, lists, scalars, nested
            structures), datetimes, Decimals or Pydantic models
        pk: Primary key value
        sk: Optional sort key value

    Returns:
        Item with PK, optional SK and the JSON payload

    Example:
        >>> encode_item({"name": "A"}, "K1")
        {'PK': 'K1', 'JSON': '{"name":"A"}'}
    """
    item = build_key(pk, sk)
    item[JSON_ATTRIBUTE] = serialize_value(value)
    return item


def decode_item(
    item: Optional[Dict[str, Any]],
    model_class: Optional[Type[BaseModel]] = None
) -> Optional[Dict[str, Any]]:
    """
    Decode a stored item in place.

    Args:
        item: Item as returned by DynamoDB, or None
        model_class: Optional Pydantic model to validate the payload into

    Returns:
        None if no item was given; the item unchanged if it has no JSON
        attribute; otherwise the item with JSON replaced by the parsed value

    Raises:
        DecodeError: If the stored payload is malformed
        ValidationError: If the payload does not match model_class
    """
    if item is None:
        return None

    if JSON_ATTRIBUTE not in item:
        return item

    key = {name: item[name] for name in (PK_ATTRIBUTE, SK_ATTRIBUTE) if name in item}
    value = deserialize_value(item[JSON_ATTRIBUTE], key)

    if model_class is not None:
        try:
            value = model_class.model_validate(value)
        except PydanticValidationError as e:
            logger.error(f"Failed to convert item {key} to {model_class.__name__}: {e}")
            raise ValidationError(
                f"Failed to convert item to {model_class.__name__}: {e}",
                {".".join(str(p) for p in err['loc']) or "__root__": err['msg'] for err in e.errors()},
                e
            ) from e

    item[JSON_ATTRIBUTE] = value
    return item

"""
Item Write API

Write operations over PK/SK/JSON items:
- put: full-item write through the codec (overwrites an existing item)
- update_item: partial mutation with a caller-supplied UpdateExpression
- delete_item: removal by key

Each method returns the raw DynamoDB response as the acknowledgment.
Expressions are passed through verbatim; DynamoDB validates them.
"""

import logging
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..core import ClientContext, PK_ATTRIBUTE, SK_ATTRIBUTE, encode_item

logger = logging.getLogger(__name__)


def _key_of(item: Dict[str, Any]) -> Dict[str, Any]:
    return {name: item[name] for name in (PK_ATTRIBUTE, SK_ATTRIBUTE) if name in item}


class ItemWriteApi:
    """Write API for stored items."""

    def __init__(self, context: ClientContext):
        """Initialize write API with a client context."""
        self.context = context

    def put(
        self,
        value: Any,
        pk: Any,
        sk: Any = None,
        condition_expression=None
    ) -> Dict[str, Any]:
        """
        Store a value under the given key, replacing any existing item.

        DynamoDB Operation: PutItem

        Args:
            value: Application value, serialized into the JSON attribute
            pk: Primary key value
            sk: Optional sort key value
            condition_expression: Optional condition, e.g.
                Attr('PK').not_exists() to refuse overwrites

        Returns:
            Raw PutItem response

        Example:
            api.put({"name": "A", "age": 1}, "K1")
        """
        handle = self.context.require_handle("put")
        item = encode_item(value, pk, sk)

        put_kwargs = {'Item': item}
        if condition_expression is not None:
            put_kwargs['ConditionExpression'] = condition_expression

        table_name = handle.table_name
        try:
            response = handle.table().put_item(**put_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to put item {_key_of(item)} in {table_name}: {e}")
            raise

        logger.info(f"Put item in {table_name}: {_key_of(item)}")
        return response

    def update_item(
        self,
        key: Dict[str, Any],
        update_expression: str,
        attribute_values: Optional[Dict[str, Any]] = None,
        attribute_names: Optional[Dict[str, str]] = None,
        condition_expression=None,
        return_values: str = 'NONE'
    ) -> Dict[str, Any]:
        """
        Update individual attributes of an item.

        DynamoDB Operation: UpdateItem

        Attributes written here sit beside the JSON payload and are not
        part of it; get() returns them unchanged.

        Args:
            key: Key attributes, e.g. build_key("K1", "S1")
            update_expression: UPDATE expression, e.g. "SET #n = :n"
            attribute_values: Values bound in the expression
            attribute_names: Name placeholders used in the expression
            condition_expression: Optional condition for the update
            return_values: What DynamoDB should return ('NONE', 'ALL_NEW', ...)

        Returns:
            Raw UpdateItem response
        """
        handle = self.context.require_handle("update_item")

        update_kwargs = {
            'Key': key,
            'UpdateExpression': update_expression,
            'ReturnValues': return_values
        }
        if attribute_values:
            update_kwargs['ExpressionAttributeValues'] = attribute_values
        if attribute_names:
            update_kwargs['ExpressionAttributeNames'] = attribute_names
        if condition_expression is not None:
            update_kwargs['ConditionExpression'] = condition_expression

        table_name = handle.table_name
        try:
            response = handle.table().update_item(**update_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to update item {key} in {table_name}: {e}")
            raise

        logger.info(f"Updated item in {table_name}: {key}")
        return response

    def delete_item(
        self,
        key: Dict[str, Any],
        condition_expression=None,
        return_values: str = 'NONE'
    ) -> Dict[str, Any]:
        """
        Delete an item by key.

        DynamoDB Operation: DeleteItem

        Args:
            key: Key attributes of the item
            condition_expression: Optional condition for the delete
            return_values: 'NONE' or 'ALL_OLD'

        Returns:
            Raw DeleteItem response
        """
        handle = self.context.require_handle("delete_item")

        delete_kwargs = {
            'Key': key,
            'ReturnValues': return_values
        }
        if condition_expression is not None:
            delete_kwargs['ConditionExpression'] = condition_expression

        table_name = handle.table_name
        try:
            response = handle.table().delete_item(**delete_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to delete item {key} from {table_name}: {e}")
            raise

        logger.info(f"Deleted item from {table_name}: {key}")
        return response

"""
Item Read API

Read operations over PK/SK/JSON items:
- get: GetItem by primary key (and sort key)
- query_items: Query with a key condition, in sort-key order
- scan_table: full-table Scan with an optional filter

Every returned item is decoded, so JSON holds the parsed value. Query and
scan return (items, last_key) tuples; a non-None last_key means DynamoDB
truncated the page and can be passed back to continue.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Type

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from ..core import ClientContext, build_key, decode_item

logger = logging.getLogger(__name__)


class ItemReadApi:
    """
    Read-only API for stored items.

    Holds the ClientContext rather than a handle, so a re-initialized context
    is picked up by the next call.
    """

    def __init__(self, context: ClientContext):
        """Initialize read API with a client context."""
        self.context = context

    def get(
        self,
        pk: Any,
        sk: Any = None,
        model_class: Optional[Type[BaseModel]] = None,
        consistent_read: bool = False
    ) -> Optional[Dict[str, Any]]:
        """
        Get a single item by key.

        DynamoDB Operation: GetItem

        On a table with a composite key, omitting sk makes DynamoDB reject
        the request; the ClientError is raised unchanged.

        Args:
            pk: Primary key value
            sk: Sort key value, if the table has one
            model_class: Optional Pydantic model for the JSON payload
            consistent_read: Request a strongly consistent read

        Returns:
            Decoded item, or None if no item exists for the key
        """
        handle = self.context.require_handle("get")
        key = build_key(pk, sk)

        get_kwargs = {'Key': key}
        if consistent_read:
            get_kwargs['ConsistentRead'] = True

        table_name = handle.table_name
        try:
            response = handle.table().get_item(**get_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to get item {key} from {table_name}: {e}")
            raise

        if 'Item' not in response:
            logger.debug(f"No item {key} in {table_name}")
            return None

        return decode_item(response['Item'], model_class)

    def query_items(
        self,
        key_condition_expression,
        attribute_values: Optional[Dict[str, Any]] = None,
        attribute_names: Optional[Dict[str, str]] = None,
        index_name: Optional[str] = None,
        limit: Optional[int] = None,
        last_key: Optional[dict] = None,
        scan_forward: bool = True,
        model_class: Optional[Type[BaseModel]] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[dict]]:
        """
        Query items by key condition.

        DynamoDB Operation: Query

        Args:
            key_condition_expression: Expression string such as
                "PK = :pk AND begins_with(SK, :prefix)", or a
                boto3.dynamodb.conditions Key condition
            attribute_values: Values bound in the expression
            attribute_names: Name placeholders used in the expression
            index_name: Optional secondary index to query
            limit: Maximum items to evaluate
            last_key: Pagination token from a previous page
            scan_forward: Ascending sort-key order when True
            model_class: Optional Pydantic model for each JSON payload

        Returns:
            Tuple of (decoded items, next_page_token)

        Example:
            items, last_key = api.query_items(
                "PK = :pk",
                {":pk": "user#42"},
                limit=50
            )
        """
        handle = self.context.require_handle("query_items")

        query_kwargs = {
            'KeyConditionExpression': key_condition_expression,
            'ScanIndexForward': scan_forward
        }
        if attribute_values:
            query_kwargs['ExpressionAttributeValues'] = attribute_values
        if attribute_names:
            query_kwargs['ExpressionAttributeNames'] = attribute_names
        if index_name:
            query_kwargs['IndexName'] = index_name
        if limit:
            query_kwargs['Limit'] = limit
        if last_key:
            query_kwargs['ExclusiveStartKey'] = last_key

        table_name = handle.table_name
        try:
            response = handle.table().query(**query_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to query {table_name}: {e}")
            raise

        items = [decode_item(item, model_class) for item in response.get('Items', [])]
        next_key = response.get('LastEvaluatedKey')
        logger.debug(f"Query on {table_name} returned {len(items)} items (truncated: {next_key is not None})")
        return items, next_key

    def scan_table(
        self,
        filter_expression=None,
        attribute_values: Optional[Dict[str, Any]] = None,
        attribute_names: Optional[Dict[str, str]] = None,
        limit: Optional[int] = None,
        last_key: Optional[dict] = None,
        model_class: Optional[Type[BaseModel]] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[dict]]:
        """
        Scan the whole table.

        DynamoDB Operation: Scan

        Scans read every item in the table and are billed accordingly;
        prefer query_items when the partition key is known.

        Args:
            filter_expression: Optional filter, string or boto3 Attr condition
            attribute_values: Values bound in the filter
            attribute_names: Name placeholders used in the filter
            limit: Maximum items to evaluate
            last_key: Pagination token from a previous page
            model_class: Optional Pydantic model for each JSON payload

        Returns:
            Tuple of (decoded items, next_page_token), in no particular order
        """
        handle = self.context.require_handle("scan_table")

        scan_kwargs = {}
        if filter_expression is not None:
            scan_kwargs['FilterExpression'] = filter_expression
        if attribute_values:
            scan_kwargs['ExpressionAttributeValues'] = attribute_values
        if attribute_names:
            scan_kwargs['ExpressionAttributeNames'] = attribute_names
        if limit:
            scan_kwargs['Limit'] = limit
        if last_key:
            scan_kwargs['ExclusiveStartKey'] = last_key

        table_name = handle.table_name
        if 'Limit' not in scan_kwargs:
            logger.warning(f"Scan on {table_name} without Limit - consider adding one")

        try:
            response = handle.table().scan(**scan_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to scan {table_name}: {e}")
            raise

        items = [decode_item(item, model_class) for item in response.get('Items', [])]
        return items, response.get('LastEvaluatedKey')

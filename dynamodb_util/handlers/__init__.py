"""
Handler Layer for dynamodb-util

Read and write operations are kept apart:
- queries.py: get, query_items, scan_table
- commands.py: put, update_item, delete_item

Both sit on top of core/ (client context and item codec):
handlers/ (this layer) -> core/ -> DynamoDB
"""

from .commands import ItemWriteApi
from .queries import ItemReadApi

__all__ = [
    'ItemReadApi',
    'ItemWriteApi',
]

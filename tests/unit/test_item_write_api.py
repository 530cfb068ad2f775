"""
Tests for ItemWriteApi (handlers/commands.py)
"""

from unittest.mock import Mock, patch

import pytest
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from dynamodb_util import ClientContext, ItemWriteApi, build_key
from dynamodb_util.exceptions import NotInitializedError, ValidationError


class TestPut:

    def test_put_stores_single_payload_attribute(self, write_api, items_table):
        write_api.put({"name": "A", "age": 1}, "K1")

        stored = items_table.get_item(Key={"PK": "K1"})["Item"]
        assert stored == {"PK": "K1", "JSON": '{"name":"A","age":1}'}

    def test_put_overwrites_existing_item(self, write_api, items_table):
        items_table.put_item(Item={"PK": "K1", "JSON": '"old"', "extra": "attribute"})

        write_api.put("new", "K1")

        stored = items_table.get_item(Key={"PK": "K1"})["Item"]
        assert stored == {"PK": "K1", "JSON": '"new"'}

    def test_put_returns_response(self, write_api):
        response = write_api.put("v", "K1")

        assert response['ResponseMetadata']['HTTPStatusCode'] == 200

    def test_put_with_condition(self, write_api):
        write_api.put("first", "K1", condition_expression=Attr("PK").not_exists())

        with pytest.raises(ClientError) as exc_info:
            write_api.put("second", "K1", condition_expression=Attr("PK").not_exists())

        assert exc_info.value.response['Error']['Code'] == 'ConditionalCheckFailedException'

    def test_put_without_primary_key(self, write_api):
        with pytest.raises(ValidationError):
            write_api.put("v", None)

    def test_put_logs_key_not_payload(self, write_api):
        with patch('dynamodb_util.handlers.commands.logger') as mock_logger:
            write_api.put({"secret": "payload"}, "K1")

        mock_logger.info.assert_called_once_with("Put item in test_items: {'PK': 'K1'}")

    def test_put_before_initialize(self):
        with pytest.raises(NotInitializedError) as exc_info:
            ItemWriteApi(ClientContext()).put("v", "K1")

        assert exc_info.value.operation == "put"


class TestUpdateItem:

    def test_update_sets_attribute_beside_payload(self, write_api, read_api):
        write_api.put({"name": "A"}, "K1")

        write_api.update_item(
            build_key("K1"),
            "SET #c = :c",
            {":c": 3},
            attribute_names={"#c": "counter"}
        )

        item = read_api.get("K1")
        assert item["JSON"] == {"name": "A"}
        assert item["counter"] == 3

    def test_update_return_values(self, write_api):
        write_api.put("v", "K1")

        response = write_api.update_item(
            build_key("K1"),
            "SET #v = :v",
            {":v": 1},
            attribute_names={"#v": "visit_count"},
            return_values="ALL_NEW"
        )

        assert response['Attributes']['visit_count'] == 1
        assert response['Attributes']['JSON'] == '"v"'

    def test_update_passes_expression_verbatim(self, client_context):
        table = Mock()
        table.update_item.return_value = {}
        api = ItemWriteApi(client_context)

        with patch.object(client_context.handle, 'table', return_value=table):
            api.update_item(
                {"PK": "K1"},
                "SET JSON = :j REMOVE stale",
                {":j": '{"a":1}'},
                condition_expression="attribute_exists(PK)"
            )

        table.update_item.assert_called_once_with(
            Key={"PK": "K1"},
            UpdateExpression="SET JSON = :j REMOVE stale",
            ReturnValues='NONE',
            ExpressionAttributeValues={":j": '{"a":1}'},
            ConditionExpression="attribute_exists(PK)"
        )


class TestDeleteItem:

    def test_delete(self, write_api, read_api):
        write_api.put("v", "K1")

        write_api.delete_item(build_key("K1"))

        assert read_api.get("K1") is None

    def test_delete_return_old(self, write_api):
        write_api.put("v", "K1")

        response = write_api.delete_item(build_key("K1"), return_values="ALL_OLD")

        assert response['Attributes'] == {"PK": "K1", "JSON": '"v"'}

    def test_delete_missing_item_is_not_an_error(self, write_api):
        response = write_api.delete_item(build_key("nothing"))

        assert response['ResponseMetadata']['HTTPStatusCode'] == 200

    def test_delete_error_propagates_unchanged(self, client_context):
        error = ClientError(
            error_response={'Error': {'Code': 'ConditionalCheckFailedException', 'Message': 'nope'}},
            operation_name='DeleteItem'
        )
        table = Mock()
        table.delete_item.side_effect = error
        api = ItemWriteApi(client_context)

        with patch.object(client_context.handle, 'table', return_value=table):
            with pytest.raises(ClientError) as exc_info:
                api.delete_item({"PK": "K1"}, condition_expression=Attr("PK").exists())

        assert exc_info.value is error

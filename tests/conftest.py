"""
Test configuration and fixtures for dynamodb-util.

Provides configurations, moto-backed tables and initialized client contexts.
"""

import os
from unittest.mock import patch

import boto3
import pytest
from moto import mock_aws

from dynamodb_util import (
    ClientContext,
    DynamoDBConfig,
    ItemReadApi,
    ItemWriteApi,
)
from dynamodb_util import store

SIMPLE_TABLE = "test_items"
COMPOSITE_TABLE = "test_items_composite"

AWS_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_REGION",
    "COGNITO_IDENTITY_POOL_ID",
    "DYNAMODB_ENDPOINT_URL",
    "DYNAMODB_TABLE",
    "DYNAMODB_DEBUG_LOGGING",
)


@pytest.fixture
def clean_env():
    """Environment without any AWS or dynamodb-util settings."""
    env = {k: v for k, v in os.environ.items() if k not in AWS_ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def mock_dynamodb_config(clean_env):
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        table_name=SIMPLE_TABLE
    )


@pytest.fixture
def mock_dynamodb_resource(clean_env):
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def items_table(mock_dynamodb_resource):
    """Table keyed by PK only."""
    return mock_dynamodb_resource.create_table(
        TableName=SIMPLE_TABLE,
        KeySchema=[
            {'AttributeName': 'PK', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'PK', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def composite_table(mock_dynamodb_resource):
    """Table keyed by PK and SK."""
    return mock_dynamodb_resource.create_table(
        TableName=COMPOSITE_TABLE,
        KeySchema=[
            {'AttributeName': 'PK', 'KeyType': 'HASH'},
            {'AttributeName': 'SK', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'PK', 'AttributeType': 'S'},
            {'AttributeName': 'SK', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def client_context(mock_dynamodb_config, items_table):
    """Client context initialized against the PK-only table."""
    context = ClientContext()
    context.initialize(mock_dynamodb_config)
    return context


@pytest.fixture
def composite_context(mock_dynamodb_config, composite_table):
    """Client context initialized against the PK+SK table."""
    context = ClientContext()
    context.initialize(mock_dynamodb_config, table_name=COMPOSITE_TABLE)
    return context


@pytest.fixture
def read_api(client_context):
    return ItemReadApi(client_context)


@pytest.fixture
def write_api(client_context):
    return ItemWriteApi(client_context)


@pytest.fixture
def fresh_default_context(monkeypatch):
    """Replace the process-wide context with an uninitialized one."""
    context = ClientContext()
    monkeypatch.setattr(store, "default_context", context)
    return context


@pytest.fixture
def sample_profile():
    """Sample application value for testing."""
    return {
        "name": "A",
        "age": 1,
        "tags": ["admin", "beta"],
        "address": {"city": "Lisbon", "zip": None},
        "active": True,
        "score": 9.5
    }

"""
DynamoDB Client Factory

Builds the boto3 DynamoDB resource every item operation goes through and
keeps it in an explicit ClientContext instead of a bare module global.

- ClientHandle: configuration + boto3 resource; resolves the target table on
  each call
- ClientContext: holder of the current handle with an explicit initialized
  check
- create_client_handle: factory wiring credentials, endpoint and botocore
  connection settings together

There is no teardown. Re-initializing a context swaps the handle for new
operations; callers that already fetched the old handle keep using it.
"""

import logging
from typing import Optional

from botocore.config import Config

from ..config import DynamoDBConfig
from ..exceptions import ConnectionError, NotInitializedError
from .credentials import Credentials, resolve_credentials

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "dynamodb_util"


class ClientHandle:
    """Configured DynamoDB resource bound to a configuration."""

    def __init__(self, config: DynamoDBConfig, resource, credentials: Credentials):
        self.config = config
        self.resource = resource
        self.credentials = credentials

    @property
    def table_name(self) -> str:
        """Target table, resolved at call time."""
        return self.config.get_table_name()

    def table(self):
        """Get the boto3 Table resource for the current target table."""
        return self.resource.Table(self.table_name)

    def __repr__(self) -> str:
        return f"ClientHandle(region_name={self.config.region_name!r}, credentials={self.credentials!r})"


def create_client_handle(config: DynamoDBConfig, credentials: Credentials) -> ClientHandle:
    """
    Create a DynamoDB resource for the given credentials.

    Args:
        config: DynamoDB configuration
        credentials: Resolved credential variant

    Returns:
        ClientHandle wrapping the boto3 DynamoDB resource

    Raises:
        ConnectionError: If the session or resource cannot be built
    """
    if config.enable_debug_logging:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    try:
        session = credentials.create_session(config.region_name)

        dynamodb_config = {
            'region_name': config.region_name
        }

        if config.endpoint_url:
            dynamodb_config['endpoint_url'] = config.endpoint_url

        # Retries, pooling and timeouts stay botocore's business
        dynamodb_config['config'] = Config(
            retries={'max_attempts': config.retries},
            max_pool_connections=config.max_pool_connections,
            read_timeout=config.timeout_seconds,
            connect_timeout=config.timeout_seconds
        )

        resource = session.resource('dynamodb', **dynamodb_config)
    except Exception as e:
        logger.error(f"Failed to create DynamoDB resource: {e}")
        raise ConnectionError(
            f"Failed to connect to DynamoDB: {e}",
            e,
            {'region_name': config.region_name, 'endpoint_url': config.endpoint_url}
        ) from e

    return ClientHandle(config, resource, credentials)


class ClientContext:
    """
    Holder for the DynamoDB handle shared by item operations.

    initialize() must run before any operation; afterwards every operation
    reads the handle through the `handle` property. There is no locking:
    initialize once, before concurrent traffic starts.
    """

    def __init__(self):
        self._handle: Optional[ClientHandle] = None

    @property
    def initialized(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> ClientHandle:
        """Current handle.

        Raises:
            NotInitializedError: If initialize() has not completed yet
        """
        if self._handle is None:
            raise NotInitializedError()
        return self._handle

    def require_handle(self, operation: str) -> ClientHandle:
        """Current handle, naming the attempted operation when missing."""
        if self._handle is None:
            raise NotInitializedError(operation)
        return self._handle

    def initialize(self, config: Optional[DynamoDBConfig] = None, **overrides) -> ClientHandle:
        """
        Resolve credentials and create the DynamoDB handle.

        Args:
            config: Full configuration; built from environment defaults and
                `overrides` when omitted
            **overrides: DynamoDBConfig fields, e.g. region_name,
                identity_pool_id, aws_access_key_id, aws_secret_access_key

        Returns:
            The new ClientHandle

        Raises:
            ConfigurationError: If credentials are insufficient
            ConnectionError: If the DynamoDB resource cannot be created
        """
        if config is None:
            config = DynamoDBConfig(**overrides)
        elif overrides:
            config = DynamoDBConfig.model_validate({**config.model_dump(), **overrides})

        credentials = resolve_credentials(config)
        handle = create_client_handle(config, credentials)

        if self._handle is not None:
            logger.warning("Replacing existing DynamoDB client handle")
        self._handle = handle
        logger.info(f"Initialized DynamoDB client in {config.region_name} using {credentials.method} credentials")
        return handle

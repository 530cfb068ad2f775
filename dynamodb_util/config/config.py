import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ConfigurationError

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Configuration for the DynamoDB connection and item operations."""

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # Credentials: an identity pool id takes priority over the static key pair
    identity_pool_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("COGNITO_IDENTITY_POOL_ID"),
        description="Cognito identity pool id for federated credentials"
    )

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    table_name: Optional[str] = Field(
        default=None,
        description="Target table; when unset DYNAMODB_TABLE is read on every operation"
    )

    # Connection settings, handed to botocore
    max_pool_connections: int = Field(
        default=50,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Maximum attempts botocore makes for a failed request"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('retries', 'max_pool_connections')
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    def get_table_name(self) -> str:
        """Get the table every item operation targets.

        The environment is consulted on each call, so changing DYNAMODB_TABLE
        after initialization redirects subsequent operations.

        Returns:
            Table name

        Raises:
            ConfigurationError: If no table name is configured
        """
        table_name = self.table_name or os.getenv("DYNAMODB_TABLE")
        if not table_name:
            raise ConfigurationError(
                "DynamoDB table name is not configured; set DYNAMODB_TABLE",
                missing=["DYNAMODB_TABLE"]
            )
        return table_name

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, table_name: Optional[str] = None) -> 'DynamoDBConfig':
        """Create configuration for DynamoDB Local.

        Args:
            table_name: Optional explicit table name

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            identity_pool_id=None,
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            table_name=table_name,
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid"
    )

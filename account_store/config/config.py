import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

LOCAL_ENDPOINT_URL = "http://127.0.0.1:8000"
DEFAULT_REGION = "eu-central-1"
DEFAULT_PROFILE = "home-cloud"


class DynamoDBConfig(BaseModel):
    """Configuration for DynamoDB connection and operations."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    profile_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_PROFILE"),
        description="Named profile from the shared credentials file"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", DEFAULT_REGION),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for DynamoDB Local)"
    )

    # Table configuration
    table_prefix: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE_PREFIX", ""),
        description="Prefix to add to all table names"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    max_attempts: int = Field(
        default=1,
        description="Total attempts per request, including the first one"
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

    @field_validator('max_attempts')
    @classmethod
    def validate_max_attempts(cls, v):
        if v < 1:
            raise ValueError("max_attempts must be at least 1")
        return v

    @property
    def is_local(self) -> bool:
        """Whether this configuration points at a local emulator."""
        return self.endpoint_url is not None

    def get_table_name(self, base_name: str) -> str:
        """Get the full table name with prefix.

        Args:
            base_name: Base table name

        Returns:
            Full table name, e.g. ``myapp_Accounts`` or just ``Accounts``
        """
        if self.table_prefix:
            return f"{self.table_prefix}_{base_name}"
        return base_name

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, endpoint_url: str = LOCAL_ENDPOINT_URL) -> 'DynamoDBConfig':
        """Create configuration for DynamoDB Local.

        The emulator ignores credentials, but botocore still signs every
        request, so placeholder keys are set.

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            profile_name=None,
            region_name=DEFAULT_REGION,
            endpoint_url=endpoint_url,
            enable_debug_logging=True
        )

    @classmethod
    def for_remote(cls, profile_name: str = DEFAULT_PROFILE, region_name: str = DEFAULT_REGION) -> 'DynamoDBConfig':
        """Create configuration for the real DynamoDB service.

        Credentials are resolved by botocore from the named profile in the
        shared credentials file (``~/.aws/credentials``).

        Returns:
            DynamoDBConfig instance configured for the remote service
        """
        return cls(
            aws_access_key_id=None,
            aws_secret_access_key=None,
            profile_name=profile_name,
            region_name=region_name,
            endpoint_url=None
        )

    model_config = ConfigDict(
        validate_assignment=True
    )

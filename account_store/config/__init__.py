from .config import DEFAULT_PROFILE, DEFAULT_REGION, LOCAL_ENDPOINT_URL, DynamoDBConfig

__all__ = [
    "DynamoDBConfig",
    "DEFAULT_PROFILE",
    "DEFAULT_REGION",
    "LOCAL_ENDPOINT_URL",
]

from typing import Any, Dict, Optional


class AccountStoreError(Exception):
    """Root of every exception the account store raises.

    ``original_error`` is the botocore or pydantic exception being translated,
    if any. ``context`` holds the identifiers (table, key, profile) that help
    locate the failure and is rendered after the message.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = dict(context) if context else {}
        super().__init__(message)

    @property
    def error_code(self) -> Optional[str]:
        """DynamoDB error code of the translated ClientError, or None."""
        response = getattr(self.original_error, 'response', None)
        if not isinstance(response, dict):
            return None
        return response.get('Error', {}).get('Code')

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} (Context: {details})"

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.error_code:
            args.append(f"error_code={self.error_code!r}")
        if self.context:
            args.append(f"context={self.context!r}")
        return f"{type(self).__name__}({', '.join(args)})"

from typing import Any, Dict, Optional


class DynamoDBUtilError(Exception):
    """Base exception for errors raised by dynamodb-util itself.

    Errors reported by DynamoDB are not subclasses of this; they propagate
    as the botocore exceptions boto3 raised.

    Attributes:
        message: Human-readable error message
        original_error: The exception this error was raised from, if any
        context: Key/value details appended to str(error)
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {details})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, original_error={self.original_error!r}, context={self.context!r})"

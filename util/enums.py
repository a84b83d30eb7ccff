# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    MISSING_CREDENTIALS = ErrorInfo(
        "Missing account ID or API key", status.HTTP_400_BAD_REQUEST
    )
    MISSING_NAMESPACE_ID = ErrorInfo("Missing namespace ID", status.HTTP_400_BAD_REQUEST)
    UNAUTHORIZED = ErrorInfo("Unauthorized", status.HTTP_401_UNAUTHORIZED)
    INVALID_CREDENTIALS = ErrorInfo("Invalid credentials", status.HTTP_401_UNAUTHORIZED)
    VALIDATION_FAILED = ErrorInfo(
        "Error validating credentials", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    NAMESPACES_FAILED = ErrorInfo(
        "Error fetching namespaces", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    OBJECTS_FAILED = ErrorInfo(
        "Error fetching objects", status.HTTP_500_INTERNAL_SERVER_ERROR
    )

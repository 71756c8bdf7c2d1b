from rest_framework import status
from rest_framework.exceptions import APIException, NotFound


class ParentNotFound(NotFound):
    default_detail = "Parent node not found"
    default_code = "parent_not_found"


class InvalidOperation(APIException):
    """Raised when an operation cannot be applied to a parent value."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid operation"
    default_code = "invalid_operation"

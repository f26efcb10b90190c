from httperror.client import raise_for_error
from httperror.core.errors import ErrorName, HttpError, SuccessfulResponseError, missing_field_error

__all__ = [
    "ErrorName",
    "HttpError",
    "SuccessfulResponseError",
    "missing_field_error",
    "raise_for_error",
]

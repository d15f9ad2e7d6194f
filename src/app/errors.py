"""
Error codes returned by use cases, grouped by kind.

The API layer maps a kind to an HTTP status; use cases only pick codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    validation = "validation"
    auth = "auth"
    forbidden = "forbidden"
    not_found = "not_found"
    config = "config"
    unknown = "unknown"


# Validation
MISSING_FIELDS = "MISSING_FIELDS"
MISSING_PARAMS = "MISSING_PARAMS"
PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
FIELD_NOT_UPDATABLE = "FIELD_NOT_UPDATABLE"
NO_FIELDS_TO_UPDATE = "NO_FIELDS_TO_UPDATE"
INVALID_FILTER = "INVALID_FILTER"
INVALID_FREQUENCY = "INVALID_FREQUENCY"
INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

# Auth
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
INVALID_TOKEN = "INVALID_TOKEN"
TOKEN_USER_MISMATCH = "TOKEN_USER_MISMATCH"

# Forbidden
FORBIDDEN = "FORBIDDEN"

# Not found
USER_NOT_FOUND = "USER_NOT_FOUND"
NO_USERS_FOUND = "NO_USERS_FOUND"
TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"

# Server
SERVER_CONFIG_ERROR = "SERVER_CONFIG_ERROR"
TOKEN_GENERATION_FAILED = "TOKEN_GENERATION_FAILED"
UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_KINDS = {
    MISSING_FIELDS: ErrorKind.validation,
    MISSING_PARAMS: ErrorKind.validation,
    PASSWORD_MISMATCH: ErrorKind.validation,
    USER_ALREADY_EXISTS: ErrorKind.validation,
    FIELD_NOT_UPDATABLE: ErrorKind.validation,
    NO_FIELDS_TO_UPDATE: ErrorKind.validation,
    INVALID_FILTER: ErrorKind.validation,
    INVALID_FREQUENCY: ErrorKind.validation,
    INVALID_DATE_RANGE: ErrorKind.validation,
    INVALID_CREDENTIALS: ErrorKind.auth,
    INVALID_TOKEN: ErrorKind.auth,
    TOKEN_USER_MISMATCH: ErrorKind.auth,
    FORBIDDEN: ErrorKind.forbidden,
    USER_NOT_FOUND: ErrorKind.not_found,
    NO_USERS_FOUND: ErrorKind.not_found,
    TRANSACTION_NOT_FOUND: ErrorKind.not_found,
    SERVER_CONFIG_ERROR: ErrorKind.config,
    TOKEN_GENERATION_FAILED: ErrorKind.config,
    UNKNOWN_ERROR: ErrorKind.unknown,
}


def kind_of(code: str) -> ErrorKind:
    return ERROR_KINDS.get(code, ErrorKind.unknown)

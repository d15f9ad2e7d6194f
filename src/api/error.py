from typing import Dict, Optional

from fastapi import status
from libs.result import Error

from src.app.errors import ErrorKind, kind_of

STATUS_BY_KIND = {
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.auth: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.forbidden: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def to_http_error(
    error: Error, status_overrides: Optional[Dict[str, int]] = None
) -> Exception:
    """
    Map a use case error to ClientError or ServerError by its kind.

    status_overrides pins specific codes to a status regardless of kind.
    """
    if status_overrides and error.code in status_overrides:
        return ClientError(error, status_code=status_overrides[error.code])

    status_code = STATUS_BY_KIND.get(kind_of(error.code))
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)

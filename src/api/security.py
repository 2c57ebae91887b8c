"""HTTP Basic credential extraction

Every protected request carries username and password; they are handed
to the ownership gate as a CredentialsDTO and checked on each call.
"""

from typing import Optional
from fastapi import Depends, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from libs.result import Error
from src.api.error import ClientError
from src.app.errors import AUTHENTICATION_FAILURES, ErrorCode
from src.app.use_cases.accounts.dtos import CredentialsDTO

basic_auth = HTTPBasic(auto_error=False)

WWW_AUTHENTICATE = {"WWW-Authenticate": 'Basic realm="restricted", charset="UTF-8"'}


def unauthorized() -> ClientError:
    """Single 401 for every authentication failure, whatever its cause"""
    return ClientError(
        Error(code="UNAUTHORIZED", message="Invalid username or password"),
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers=WWW_AUTHENTICATE,
    )


def get_credentials(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
) -> CredentialsDTO:
    if credentials is None:
        raise unauthorized()
    return CredentialsDTO(username=credentials.username, password=credentials.password)


def raise_for_error(error: Error) -> None:
    """Translate a use case error into the matching HTTP error"""
    if error.code in AUTHENTICATION_FAILURES:
        raise unauthorized()
    if error.code == ErrorCode.DUPLICATE_IDENTITY.value:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    if error.code == ErrorCode.PERSISTENCE_ERROR.value:
        raise ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise ClientError(error)

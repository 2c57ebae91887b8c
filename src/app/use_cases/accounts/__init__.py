"""Account use cases"""
from .register_user import RegisterUser
from .authenticate_user import AuthenticateUser
from .resolve_user import ResolveUser
from .dtos import RegisterCommandDTO, CredentialsDTO, UserResponseDTO

__all__ = [
    "RegisterUser",
    "AuthenticateUser",
    "ResolveUser",
    "RegisterCommandDTO",
    "CredentialsDTO",
    "UserResponseDTO",
]

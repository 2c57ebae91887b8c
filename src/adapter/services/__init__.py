from .unit_of_work import SqlAlchemyUnitOfWork
from .password_hasher import BcryptPasswordHasher
from .database import create_engine_from_config, create_session_factory, init_db

__all__ = [
    "SqlAlchemyUnitOfWork",
    "BcryptPasswordHasher",
    "create_engine_from_config",
    "create_session_factory",
    "init_db",
]

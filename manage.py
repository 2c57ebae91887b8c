#!/usr/bin/env python3
"""CLI management tool for the money tracker database.

Provides commands to:
- Create the database schema
- Add users with bcrypt-hashed passwords
- List a user's transactions (operator access, no password required)
"""

import argparse
import asyncio
import getpass
import sys

from config import ApplicationConfig
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.database import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.errors import ErrorCode
from src.app.use_cases.accounts import RegisterUser, RegisterCommandDTO
from src.depends import build_ownership_gate


async def init_db_command(args, engine) -> int:
    """Create all tables."""
    await init_db(engine)
    print("✓ Database initialized")
    return 0


async def add_user(args, engine) -> int:
    """Add a new user, prompting for the password if not given."""
    password = args.password or getpass.getpass(f"Password for {args.username}: ")

    hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    async with create_session_factory(engine)() as session:
        use_case = RegisterUser(
            SqlAlchemyUnitOfWork(session), SqlAlchemyUserRepository(session), hasher
        )
        result = await use_case.execute(
            RegisterCommandDTO(username=args.username, password=password)
        )

    if result.is_err():
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1

    print(f"✓ User created: {result.value.user_id} ({result.value.username})")
    return 0


async def list_transactions(args, engine) -> int:
    """List all transactions of one user."""
    hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    async with create_session_factory(engine)() as session:
        gate = build_ownership_gate(session, hasher)
        result = await gate.list_for_username(args.username)

    if result.is_err():
        if result.error.code == ErrorCode.UNKNOWN_IDENTITY.value:
            print(f"Error: User '{args.username}' not found", file=sys.stderr)
        else:
            print(f"Error: {result.error.message}", file=sys.stderr)
        return 1

    listing = result.value
    if not listing.transactions:
        print("No transactions found")
        return 0

    print(f"{'ID':<8} {'Date':<20} {'Amount':>14}  Description")
    print("-" * 60)
    for txn in listing.transactions:
        print(
            f"{txn.id:<8} {txn.created_at:%Y-%m-%d %H:%M:%S} "
            f"{txn.amount:>14}  {txn.description}"
        )
    print("-" * 60)
    print(f"{listing.total} transaction(s), balance {listing.balance}")
    return 0


async def run(args) -> int:
    engine = create_engine_from_config(ApplicationConfig)
    try:
        return await args.func(args, engine)
    finally:
        await engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Money tracker management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=init_db_command)

    add_parser = subparsers.add_parser("add-user", help="Add a new user")
    add_parser.add_argument("username", help="Username")
    add_parser.add_argument("--password", help="Password (prompted if omitted)")
    add_parser.set_defaults(func=add_user)

    list_parser = subparsers.add_parser("list-transactions", help="List a user's transactions")
    list_parser.add_argument("username", help="Username")
    list_parser.set_defaults(func=list_transactions)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())

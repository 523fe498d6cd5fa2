"""
Operator commands for user accounts. Run from project root:
  python -m app.scripts.manage_users create EMAIL PASSWORD NAME
  python -m app.scripts.manage_users set-password EMAIL PASSWORD
  python -m app.scripts.manage_users delete EMAIL
Deleting a user also deletes every destination they own.
"""
import argparse
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AppError
from app.core.logging import configure_logging
from app.schemas.auth import RegisterRequest
from app.services import users as user_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage HotelBediaX user accounts.")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a user")
    create.add_argument("email")
    create.add_argument("password", help="Password (6-128 chars)")
    create.add_argument("name", help="Display name (1-255 chars)")

    set_password = sub.add_parser("set-password", help="Replace a user's password")
    set_password.add_argument("email")
    set_password.add_argument("password", help="New password (6-128 chars)")

    delete = sub.add_parser("delete", help="Delete a user and their destinations")
    delete.add_argument("email")
    return parser


def run(db: Session, args: argparse.Namespace) -> int:
    """Execute one parsed command against db. Returns a process exit code."""
    if args.command == "create":
        try:
            data = RegisterRequest(email=args.email, password=args.password, name=args.name)
        except ValidationError as e:
            print(f"Invalid input: {e}", file=sys.stderr)
            return 1
        user = user_service.register(db, email=data.email, password=data.password, name=data.name)
        print(f"Created user '{user.email}' (id={user.id}).")
        return 0

    user = user_service.get_user_by_email(db, args.email)
    if user is None:
        print(f"User '{args.email}' not found.", file=sys.stderr)
        return 1

    if args.command == "set-password":
        try:
            RegisterRequest(email=user.email, password=args.password, name=user.name)
        except ValidationError as e:
            print(f"Invalid password: {e}", file=sys.stderr)
            return 1
        user_service.update_user(db, user, password=args.password)
        print(f"Password updated for '{user.email}'.")
        return 0

    email = user.email
    removed = user_service.delete_user(db, user.id)
    print(f"Deleted user '{email}' and {removed} destination(s).")
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging(get_settings().LOG_LEVEL)
    args = build_parser().parse_args(argv)
    db = SessionLocal()
    try:
        return run(db, args)
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

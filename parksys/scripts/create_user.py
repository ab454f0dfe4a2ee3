"""
Create a user (e.g. first admin). Run from project root:
  python -m parksys.scripts.create_user USERNAME PASSWORD [role] [--email EMAIL] [--full-name NAME]
Example:
  python -m parksys.scripts.create_user admin your-secure-password super_admin --email admin@example.org
"""
import argparse
import logging
import sys

from parksys.core.config import get_settings
from parksys.core.database import Database
from parksys.core.errors import ConflictError
from parksys.core.logging import configure_logging
from parksys.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from parksys.models.user import ROLES
from parksys.repositories import UserRepository

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a ParkSys user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=ROLES)
    parser.add_argument("--email", default=None)
    parser.add_argument("--full-name", default=None)
    parser.add_argument("--municipality-id", type=int, default=None)
    return parser


def main(argv: list[str] | None = None, database: Database | None = None) -> int:
    args = build_parser().parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    owns_database = database is None
    if owns_database:
        settings = get_settings()
        configure_logging(settings)
        database = Database.from_settings(settings)
    db = database.session()
    try:
        repo = UserRepository(db)
        if repo.get_by_username(username):
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        try:
            repo.create_user(
                username=username,
                password=args.password,
                role=args.role,
                email=args.email,
                full_name=args.full_name,
                municipality_id=args.municipality_id,
            )
        except ConflictError as e:
            print(e.message, file=sys.stderr)
            return 1
        logger.info("Created user %s with role %s", username, args.role)
        print(f"Created user '{username}' with role '{args.role}'.")
        return 0
    finally:
        db.close()
        if owns_database:
            database.dispose()


if __name__ == "__main__":
    sys.exit(main())

"""
Create a user (e.g. a second admin) from the shell. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m app.scripts.create_user alice a-long-password admin

The account must change its password at first login, like accounts created
from the dashboard.
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import ValidationError
from app.models.user import ROLE_USER, ROLES
from app.schemas.user import UserCreate
from app.services.users import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a RadioHub user.")
    parser.add_argument("username", help="Username (3-50 chars)")
    parser.add_argument("password", help="Password (8-100 chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=list(ROLES))
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not (3 <= len(username) <= 50):
        print("Invalid username length.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        create_user(db, UserCreate(username=username, password=args.password, role=args.role))
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{username}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

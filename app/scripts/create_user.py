"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD EMAIL [role]
Example:
  python -m app.scripts.create_user admin 'S3cure!pass' admin@example.com admin
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import create_client
from app.core.exceptions import DuneError
from app.schemas.auth import RegisterRequest, Role
from app.services.auth import create_account
from app.stores import AccountStore


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a player or admin account.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password matching PASSWORD_POLICY_PATTERN")
    parser.add_argument("email", help="Contact email")
    parser.add_argument("role", nargs="?", default="user", choices=[r.value for r in Role])
    args = parser.parse_args()

    settings = get_settings()
    client = create_client(settings)
    try:
        accounts = AccountStore(client[settings.MONGODB_DB_NAME])
        command = RegisterRequest(username=args.username, password=args.password, email=args.email)
        create_account(accounts, command, Role(args.role), settings)
        print(f"Created user '{args.username.strip()}' with role '{args.role}'.")
        return 0
    except DuneError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())

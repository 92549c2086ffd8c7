"""
Create a user (e.g. an extra admin). Run from project root:
  python -m skillsnap.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m skillsnap.scripts.create_user admin@example.com your-secure-password Admin
"""
import argparse
import logging
import sys

from skillsnap.core.database import SessionLocal, init_db
from skillsnap.models.user import DEFAULT_ROLES, ROLE_USER
from skillsnap.services.credentials import CredentialError, CredentialStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a SkillSnap user.")
    parser.add_argument("email", help="Email address (unique, case-insensitive)")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=list(DEFAULT_ROLES))
    parser.add_argument("--username", default=None, help="Display name (defaults to email)")
    args = parser.parse_args(argv)

    email = args.email.strip()
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1

    init_db()
    db = SessionLocal()
    try:
        store = CredentialStore(db)
        store.ensure_roles(DEFAULT_ROLES)
        try:
            user = store.create(
                username=args.username or email,
                email=email,
                password=args.password,
            )
            store.add_to_role(user, args.role)
        except CredentialError as e:
            print(f"{e.code}: {e.description}", file=sys.stderr)
            return 1
        print(f"Created user '{email}' (id {user.id}) with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

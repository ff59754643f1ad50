"""Printeez management CLI.

Usage:
    python src/manage.py setup-db                       # Create all tables
    python src/manage.py drop-db                        # Drop all tables
    python src/manage.py create-admin --email a@b.com   # Grant admin rights
    python src/manage.py create-admin --email a@b.com --name Admin --password s3cret
                                                        # Register and grant in one go
"""

import argparse
import sys


def _domain():
    from printeez.domain import printeez

    print("Initializing printeez domain...")
    printeez.init()
    return printeez


def setup_database():
    from printeez.utils.db import setup_db

    domain = _domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from printeez.utils.db import drop_db

    domain = _domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def create_admin(email, name=None, password=None):
    """Promote the user registered under ``email``, registering them first if a password is given."""
    from protean.exceptions import ObjectNotFoundError, ValidationError

    from printeez.user.registration import PromoteToAdmin, RegisterUser
    from printeez.user.user import User

    domain = _domain()
    with domain.domain_context():
        repo = domain.repository_for(User)
        if repo.find_by_email(email) is None:
            if not password:
                print(f"No user registered with {email}; pass --password to create one.")
                return 1
            try:
                domain.process(
                    RegisterUser(name=name or "Admin", email=email, password=password),
                    asynchronous=False,
                )
            except ValidationError as exc:
                print(f"Could not register {email}: {exc.messages}")
                return 1
            print(f"Registered {email}.")

        try:
            user_id = domain.process(PromoteToAdmin(email=email), asynchronous=False)
        except ObjectNotFoundError as exc:
            print(str(exc))
            return 1

    print(f"{email} is now an admin (user id {user_id}).")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Printeez management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Grant admin rights to a user")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--name")
    admin_parser.add_argument("--password")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "create-admin":
        sys.exit(create_admin(args.email, name=args.name, password=args.password))


if __name__ == "__main__":
    main()

"""Utility script to provision a local user and print a session token."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import sign_in_with_oauth
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the development sign-in."""

    parser = argparse.ArgumentParser(
        description="Sign in a development account for the Tingle API and print its token.",
    )
    parser.add_argument("--name", default="Dev User", help="Display name (default: Dev User)")
    parser.add_argument("--email", default=None, help="Email address (optional)")
    parser.add_argument(
        "--account-id",
        default="dev-user",
        help="Account identifier under the 'dev' provider (default: dev-user)",
    )
    return parser.parse_args()


def main() -> None:
    """Create or reuse the account and print an access token for it."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        user = sign_in_with_oauth(
            session,
            provider="dev",
            provider_account_id=args.account_id,
            email=args.email,
            name=args.name,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not sign in: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while signing in: {exc}") from exc
    else:
        token = create_access_token({"sub": str(user.id)})
        print(
            "Signed in:\n"
            f"  ID: {user.id}\n"
            f"  Username: @{user.username}\n"
            f"  Token: {token}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()

"""
Print a bearer token for local testing.

Example:
  python -m scripts.issue_token hr.lead@local.test --role hr_manager
  curl -H "Authorization: Bearer $(python -m scripts.issue_token me@local.test)" localhost:8000/forms
"""
import argparse
from datetime import timedelta

from app.core.security import create_access_token


def main(argv: list[str] | None = None) -> str:
    parser = argparse.ArgumentParser(description="Issue a dev JWT for the HR Forms Service")
    parser.add_argument("subject", help="User id or email placed in the token's sub claim")
    parser.add_argument("--role", dest="roles", action="append", default=[], help="Role to grant (repeatable)")
    parser.add_argument("--permission", dest="permissions", action="append", default=[], help="Permission to grant (repeatable)")
    parser.add_argument("--email", default=None)
    parser.add_argument("--minutes", type=int, default=None, help="Lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES")
    args = parser.parse_args(argv)

    token = create_access_token(
        args.subject,
        roles=args.roles,
        email=args.email or (args.subject if "@" in args.subject else None),
        permissions=args.permissions,
        expires_delta=timedelta(minutes=args.minutes) if args.minutes else None,
    )
    print(token)
    return token


if __name__ == "__main__":
    main()

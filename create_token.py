"""Print a long-lived bearer token for an administrator email."""

import argparse

from dating_admin_api.app.core.config import settings
from dating_admin_api.app.core.security import create_access_token


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Issue an admin bearer token.")
    ap.add_argument("--email", default=settings.admin_email, help="Administrator email (token subject)")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args(argv)

    print(create_access_token({"sub": args.email}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Produce a password hash for the seeded back-office administrator.

The store keeps no state between runs, so instead of rewriting a
database row this script prints a PBKDF2-HMAC-SHA256 hash
(``pbkdf2_sha256$iterations$salt$hash``) to put in the ``ADMIN_PASSWORD_HASH``
environment variable.  With ``--check`` it verifies a password against
an existing hash instead.

Usage:
    python hash_admin_password.py --password "NewStrongPass!234"
    python hash_admin_password.py --check "$ADMIN_PASSWORD_HASH"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from dating_admin_api.app.core.security import hash_password, verify_password


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Hash or check an admin password.")
    ap.add_argument("--password", help="Password to hash. If omitted, you'll be prompted securely.")
    ap.add_argument("--check", metavar="HASH", help="Verify the password against this hash instead of hashing it.")
    args = ap.parse_args(argv)

    password = args.password or getpass.getpass("Enter admin password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    if args.check:
        if verify_password(password, args.check):
            print("[+] Password matches.")
            return 0
        print("[!] Password does not match.", file=sys.stderr)
        return 2

    print(f"ADMIN_PASSWORD_HASH={hash_password(password)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Generate a bcrypt hash for the web server's admin password.

Run this with:
    python generate_password_hash.py <password>
Or:
    ADMIN_PASSWORD=yourpassword python generate_password_hash.py

Without either, a random 16-character password is generated and printed.
"""

import os
import secrets
import sys
from typing import List, Optional

from jobboard.core.security import get_password_hash


def resolve_password(argv: List[str]) -> str:
    if argv:
        return argv[0]
    if os.getenv("ADMIN_PASSWORD"):
        return os.environ["ADMIN_PASSWORD"]
    return secrets.token_urlsafe(12)[:16]


def main(argv: Optional[List[str]] = None) -> int:
    password = resolve_password(sys.argv[1:] if argv is None else argv)
    password_hash = get_password_hash(password)

    print("\n=== Admin Password Hash Generator ===\n")
    print(f"Password: {password}")
    print(f"Hash: {password_hash}")
    print("\nAdd this to your server environment variables:")
    print(f"ADMIN_PASSWORD_HASH={password_hash}")
    print("\n⚠️  Keep these credentials secure and never commit them to git!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
from getpass import getpass

from auth.auth_utils import hash_password


def main(argv=None) -> str:
    parser = argparse.ArgumentParser(description="Print an ADMIN_PASS_HASH value for .env")
    parser.add_argument("password", nargs="?", help="prompted for when omitted")
    args = parser.parse_args(argv)

    password = args.password or getpass("Admin password: ")
    if not password:
        parser.error("password must not be empty")

    hashed = hash_password(password)

    print("=== ADMIN PASSWORD HASH ===")
    print("  Add this line to .env (ADMIN_PASS is then ignored):")
    print(f"\nADMIN_PASS_HASH={hashed}")
    return hashed


if __name__ == "__main__":
    main()

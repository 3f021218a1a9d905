import argparse
import getpass
from typing import Optional

from whitelist_admin.core.database import init_db
from whitelist_admin.core.security import hash_password

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 100


def _read_password(value: Optional[str]) -> str:
    if value is None:
        value = getpass.getpass("Admin password: ")
        confirm = getpass.getpass("Repeat password: ")
        if value != confirm:
            raise SystemExit("Passwords do not match.")
    if not MIN_PASSWORD_LENGTH <= len(value) <= MAX_PASSWORD_LENGTH:
        raise SystemExit(
            f"Password must be {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH} "
            "characters long."
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="whitelist-admin")
    sub = parser.add_subparsers(dest="command", required=True)

    hash_cmd = sub.add_parser(
        "hash-password", help="Print a hash for ADMIN_PASSWORD_HASH."
    )
    hash_cmd.add_argument("password", nargs="?")

    sub.add_parser("init-db", help="Create the whitelist tables.")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.command == "hash-password":
        print(hash_password(_read_password(args.password)))
    elif args.command == "init-db":
        init_db()
        print("Database ready.")


if __name__ == "__main__":
    main()

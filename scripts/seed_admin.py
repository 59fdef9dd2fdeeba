import argparse
from pathlib import Path
import sys

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.api.validation import validate_payload
from app.core.config import get_settings
from app.core.errors import InvalidInputError
from app.db.session import session_scope
from app.repositories import AdminRepository
from app.schemas.admins import AdminCreateRequest


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Create an admin record if its email is not taken yet.")
    parser.add_argument("--name", default=settings.bootstrap_admin_name)
    parser.add_argument("--email", default=settings.bootstrap_admin_email)
    parser.add_argument("--password", default=settings.bootstrap_admin_password)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    try:
        data = validate_payload(
            AdminCreateRequest,
            {"name": args.name, "email": args.email, "password": args.password},
        )
    except InvalidInputError as exc:
        raise SystemExit(exc.message) from exc

    with session_scope() as db:
        admins = AdminRepository(db)
        existing = admins.find_by_email(data.email)
        if existing:
            print(f"Admin {existing.email} already exists ({existing.id}).")
            return
        admin = admins.create_admin(name=data.name, email=data.email, password=data.password)
    print(f"Admin {admin.email} created ({admin.id}).")


if __name__ == "__main__":
    main()

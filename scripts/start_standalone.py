import os
import subprocess
import sys
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


def _env_default(name: str, value: str) -> None:
    current = os.environ.get(name)
    if current is None or current.strip() == "":
        os.environ[name] = value


def _prepare_environment() -> None:
    _env_default("APP_PORT", "8000")
    _env_default("DATABASE_URL", "sqlite+pysqlite:////data/volunteers.db")
    _env_default("BOOTSTRAP_ADMIN_NAME", "Administrator")
    _env_default("BOOTSTRAP_ADMIN_EMAIL", "admin@example.com")
    _env_default("BOOTSTRAP_ADMIN_PASSWORD", "admin123")
    _env_default("STANDALONE_ALLOW_EXTERNAL_DB", "false")
    _env_default("SEED_DEMO_DATA", "false")

    allow_external_db = os.environ["STANDALONE_ALLOW_EXTERNAL_DB"].strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }
    if allow_external_db:
        return

    try:
        parsed_db = make_url(os.environ["DATABASE_URL"])
    except ArgumentError:
        return

    is_postgres = parsed_db.drivername.startswith("postgres")
    is_localhost = parsed_db.host in {"localhost", "127.0.0.1", "::1"}
    if is_postgres and is_localhost:
        print(
            "Detected localhost Postgres URL in standalone mode; switching DATABASE_URL to SQLite (/data/volunteers.db). "
            "Set STANDALONE_ALLOW_EXTERNAL_DB=true to keep external DB URL.",
            flush=True,
        )
        os.environ["DATABASE_URL"] = "sqlite+pysqlite:////data/volunteers.db"


def _ensure_database_dir() -> None:
    try:
        parsed_url = make_url(os.environ["DATABASE_URL"])
    except ArgumentError:
        return

    if not parsed_url.drivername.startswith("sqlite"):
        return

    db_path = parsed_url.database
    if not db_path or db_path == ":memory:":
        return

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def _run(cmd: list[str]) -> None:
    print(">", " ".join(cmd), flush=True)
    subprocess.run(cmd, check=True)


def main() -> None:
    _prepare_environment()
    _ensure_database_dir()

    print("Starting standalone volunteer records backend with:", flush=True)
    print(f"  DATABASE_URL={os.environ['DATABASE_URL']}", flush=True)
    print(f"  BOOTSTRAP_ADMIN_EMAIL={os.environ['BOOTSTRAP_ADMIN_EMAIL']}", flush=True)

    _run([sys.executable, "-m", "alembic", "upgrade", "head"])
    _run(
        [
            sys.executable,
            "scripts/seed_admin.py",
            "--name",
            os.environ["BOOTSTRAP_ADMIN_NAME"],
            "--email",
            os.environ["BOOTSTRAP_ADMIN_EMAIL"],
            "--password",
            os.environ["BOOTSTRAP_ADMIN_PASSWORD"],
        ]
    )
    if os.environ["SEED_DEMO_DATA"].strip().lower() in {"1", "true", "yes", "on"}:
        _run([sys.executable, "scripts/seed_demo_data.py"])

    os.execvp(
        "uvicorn",
        [
            "uvicorn",
            "app.main:app",
            "--host",
            "0.0.0.0",
            "--port",
            os.environ["APP_PORT"],
        ],
    )


if __name__ == "__main__":
    main()

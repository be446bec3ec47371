import os
from pathlib import Path
import nox

# Reuse existing virtualenvs for faster runs
nox.options.reuse_existing_virtualenvs = True
# Default sessions when running "nox"
nox.options.sessions = ["lint", "tests"]

# Environment variables to propagate
PASSED_ENV_VARS = [
    "SECRET_KEY",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "DATABASE_URL",
    "TIMEZONE",
]


def _set_env(session):
    """
    Propagate configuration into the session and keep tests on their own
    throwaway SQLite database.
    """
    session.env["PYTHONPATH"] = str(Path.cwd())
    session.env["DATABASE_URL"] = "sqlite:///./.nox/test.db"
    for var in PASSED_ENV_VARS:
        if var in os.environ and var != "DATABASE_URL":
            session.env[var] = os.environ[var]


@nox.session(name="lint")
def lint(session):
    """
    Code formatting, linting, and type-checks:
      - isort
      - black
      - flake8
      - mypy
    """
    _set_env(session)
    session.install("isort", "black", "flake8", "mypy")
    session.run("isort", "app/", "tests/")
    session.run("black", "app/", "tests/")
    session.run("flake8", "app/", "tests/")
    session.run("mypy", "app/")


@nox.session(name="tests")
def tests(session):
    """
    Run unit and integration tests against in-memory SQLite.
    Pass positional args to target specific tests.
    Usage:
      nox -s tests
      nox -s tests -- tests/unit/test_services/test_attendance.py
      nox -s tests -- -m integration
    """
    _set_env(session)
    session.install("-e", ".[test]")
    targets = session.posargs or ["tests"]
    htmlcov_path = ".nox/htmlcov"
    session.run(
        "pytest",
        *targets,
        "-vv",
        "--tb=short",
        "--cov=app",
        "--cov-report=term-missing",
        "--cov-report=html:" + htmlcov_path,
        "--cov-fail-under=80",
    )

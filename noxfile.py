"""Nox sessions orchestrating the blueprints unit suites."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import nox


PYTHON_VERSIONS = ["3.11", "3.12"]
PROJECT_ROOT = Path(__file__).parent

nox.options.sessions = [
    "tests_unit_core",
    "tests_unit_api",
    "tests_unit_logging",
]


def _install_test_requirements(session: nox.Session) -> None:
    """Install the project plus the testing toolchain inside the session environment."""

    session.install("-e", ".[test]")


def _run_suite(session: nox.Session, suite: str, targets: Iterable[str]) -> None:
    _install_test_requirements(session)

    data_file = PROJECT_ROOT / f".coverage.{suite}"
    env = {"COVERAGE_FILE": str(data_file)}

    session.log("Running %s suite: %s", suite, " ".join(targets))
    session.run(
        "coverage", "run", "--branch", "-m", "pytest", *targets, *session.posargs,
        env=env,
    )
    session.run("coverage", "report", "-m", env=env)


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_core)")
def tests_unit_core(session: nox.Session) -> None:
    """Execute store, filter and catalog suites."""

    _run_suite(session, "core", ["tests/unit/blueprints", "tests/unit/config"])


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_api)")
def tests_unit_api(session: nox.Session) -> None:
    """Execute API bootstrap + HTTP suites."""

    _run_suite(session, "api", ["tests/unit/api"])


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_logging)")
def tests_unit_logging(session: nox.Session) -> None:
    """Execute logging library unit suites."""

    _run_suite(session, "logging", ["tests/unit/logging"])

import argparse
import json
import pathlib

import nox

ROOT = pathlib.Path(__file__).resolve().parent

INIT_PY = ROOT.joinpath("src", "sudokulib", "__init__.py")

nox.options.sessions = ["lint", "tests"]
nox.options.reuse_existing_virtualenvs = True


@nox.session
def lint(session):
    session.install(".[lint]")

    paths = ["src", "tests", "examples", "noxfile.py", "setup.py"]
    session.run("black", "--check", *paths)
    session.run("isort", "--check-only", *paths)
    session.run("flake8", *paths)
    session.run("mypy", "src")


@nox.session(python=["3.12", "3.11", "3.10", "3.9", "3.8", "3.7"])
def tests(session):
    session.install(".[test]")
    session.run("pytest", *(session.posargs or ["tests"]))


def _set_version(version):
    """Rewrite the ``__version__`` line, which setup.py reads back."""
    lines = INIT_PY.read_text().split("\n")
    for index, line in enumerate(lines):
        if line.startswith("__version__ = "):
            lines[index] = f"__version__ = {json.dumps(version)}"
            break
    else:
        raise ValueError("__version__ not found in __init__.py")
    INIT_PY.write_text("\n".join(lines))


@nox.session
def release(session):
    """Build distributions, and upload them if a repository is given.

    Usage: ``nox -s release -- --version 0.1.0 [--repo pypi]``
    """
    session.install(".[release]")

    parser = argparse.ArgumentParser(prog="nox -s release --")
    parser.add_argument("--version", help="Version to stamp before building.")
    parser.add_argument("--repo", help="Repository to upload to (.pypirc).")
    options = parser.parse_args(session.posargs)

    if options.version:
        _set_version(options.version)
        session.log(f"Stamped version {options.version}")

    session.run("python", "-m", "build", "--outdir", "dist")
    if options.repo:
        session.run(
            "twine", "upload", "--repository", options.repo, "dist/sudokulib-*"
        )
    else:
        session.log("Skipping upload since --repo is empty")

"""
Module entry-point so the package can be executed via `python -m dayline`.
"""

from .cli import app


if __name__ == "__main__":  # pragma: no cover
    app(prog_name="dayline")

"""Entry point for ``python -m httpboom``."""

from httpboom.cli import app

if __name__ == "__main__":
    app()

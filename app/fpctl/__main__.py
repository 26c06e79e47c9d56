"""Allow running fpctl as ``python -m fpctl``."""

from fpctl.cli.main import app

if __name__ == "__main__":
    app()

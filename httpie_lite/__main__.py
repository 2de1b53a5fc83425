"""Allow ``python -m httpie_lite``."""

from httpie_lite.cli.main import app

if __name__ == "__main__":
    app(prog_name="httpie-lite")

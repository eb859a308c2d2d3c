"""Entry point for running audix as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the audix CLI application."""
    app()


if __name__ == "__main__":
    main()

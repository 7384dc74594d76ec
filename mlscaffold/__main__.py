"""
mlscaffold - CLI Entry Point

This module serves as the main entry point when the package is run as a module:
    python -m mlscaffold <project_name> [options]

or when installed as a package:
    mlscaffold <project_name> [options]
"""

from mlscaffold.cli.main_commands import app


def main() -> None:
    """Main entry point for the mlscaffold CLI tool."""
    app()


if __name__ == "__main__":
    main()

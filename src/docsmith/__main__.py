"""Entry point for running Docsmith as a module.

Usage:
    python -m docsmith [command] [options]

Example:
    python -m docsmith create --template default-article --title "Hello"
    python -m docsmith templates --list
"""

from docsmith.cli import app

if __name__ == "__main__":
    app()

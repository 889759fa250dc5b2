"""CLI entry point for cephconf.

Allows running the CLI with 'python -m cephconf.cli'.
"""

from .cli import app
from .console import console


def main() -> int:
    """Run the CLI and turn unexpected failures into an exit code.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        app()
    except Exception as e:
        console.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

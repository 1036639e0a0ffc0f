"""Main entry point for ``python -m pg_check_conn``."""

from .cli import main


if __name__ == "__main__":
    main()

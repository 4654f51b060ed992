"""Entrypoint for `python -m upstream_ui`."""

from .cli import main


if __name__ == "__main__":
    main()

"""Module entrypoint for ``python -m lazydisk``."""

from .cli import main


if __name__ == "__main__":
    main()

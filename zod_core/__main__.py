"""Module entrypoint for `python -m zod_core`.

Delegates to the CLI implementation.
"""

from .cli.run import main


if __name__ == "__main__":
    main()

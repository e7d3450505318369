"""Module entrypoint for ``python -m goat``.

This keeps module-mode execution behavior identical to the CLI script.
The returned integer becomes the process exit status.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())

"""Module entrypoint for ``python -m repojump``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and session setup happen in ``repojump.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())

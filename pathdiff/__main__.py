"""Module entrypoint for ``python -m pathdiff``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and exit-status handling happen in ``pathdiff.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

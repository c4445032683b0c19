"""Module entrypoint for ``python -m dirsense``.

All argument parsing and scanning happen in ``dirsense.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

"""Module entrypoint for ``python -m minils``.

All argument parsing and output handling happen in ``minils.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

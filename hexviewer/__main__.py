"""Module entrypoint for ``python -m hexviewer``.

All argument parsing and runtime setup happen in ``hexviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

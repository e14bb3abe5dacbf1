"""Module entrypoint for ``python -m folderanalyzer``.

All argument parsing and runtime setup happen in ``folderanalyzer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

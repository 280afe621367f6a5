"""Module entrypoint for ``python -m dirtree``.

Argument parsing, path resolution and traversal all happen in ``dirtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

"""Allow ``python -m forgeid``."""

from .cli import main

if __name__ == "__main__":
    main()

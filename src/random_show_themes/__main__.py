"""Allow ``python -m random_show_themes``."""

from .cli import main

if __name__ == "__main__":
    main()

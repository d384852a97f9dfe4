"""Allow ``python -m context_probe``."""

from .main import main

if __name__ == "__main__":
    main()

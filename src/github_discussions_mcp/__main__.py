"""Allow ``python -m github_discussions_mcp``."""

from .server import main

if __name__ == "__main__":
    main()

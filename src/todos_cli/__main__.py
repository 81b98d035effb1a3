"""Allow running the CLI with ``python -m todos_cli``."""

from todos_cli.main import main

if __name__ == "__main__":
    main()

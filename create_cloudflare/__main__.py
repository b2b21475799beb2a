"""Allow ``python -m create_cloudflare``."""

from create_cloudflare.cli import main

if __name__ == "__main__":
    main()

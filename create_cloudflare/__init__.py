"""create-cloudflare -- scaffold Cloudflare Workers and Pages projects.

Asks for a project directory and an application type, then hands off to the
generator registered for that type.

Quick usage::

    $ create-cloudflare my-app --type hello-world
    $ python -m create_cloudflare --wrangler-defaults
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

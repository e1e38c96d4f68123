"""Command-line tools for the content SDK.

- ``python -m content_sdk.cli validate`` — check a title, address or
  subdomain against the field rules, offline.
- ``python -m content_sdk.cli check-subdomain`` — ask the service whether a
  subdomain is free.
- ``python -m content_sdk.cli get-event`` — fetch a published event by
  subdomain.

Like the rest of the package, the CLI uses argparse, and it builds its own
``httpx.AsyncClient`` per invocation since it runs as a one-shot script.
"""

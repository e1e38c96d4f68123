# =============================================================================
# content_sdk/cli/__main__.py — Package Entry Point
# =============================================================================
#
# Enables running the CLI package itself as a module:
#     python -m content_sdk.cli validate subdomain my-wedding
#
# All subcommands live in content.py.
# =============================================================================

"""Allow ``python -m content_sdk.cli`` execution."""

from content_sdk.cli.content import main

main()

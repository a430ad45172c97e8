"""Allow running as ``python -m query_catalog``."""

from query_catalog.runner import cli_entry

if __name__ == "__main__":
    cli_entry()

"""Main entry point when executing custsvc as a package.

This allows running the package using python -m custsvc.
"""

from custsvc.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()

from __future__ import annotations

"""Repo-root convenience shim for running the simulator from a checkout.

    python runner.py -f processes.txt -p 4 [-c]

It delegates to the canonical entry point:

    python -m schedlab
"""

import sys


def main() -> int:
    """Run the simulator with this process's command-line arguments."""

    from schedlab.cli import main as cli_main

    return cli_main(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

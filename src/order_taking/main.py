from __future__ import annotations

import sys

from order_taking.adapters.inbound.cli import run_cli
from order_taking.bootstrap import build_app


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("usage: order-taking '<json>'")
        return 2

    app = build_app()
    return run_cli(app, argv[0])


if __name__ == "__main__":
    raise SystemExit(main())

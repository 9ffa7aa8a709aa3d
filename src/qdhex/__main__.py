from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from qdhex.app import run_app


def _address(s: str) -> int:
    try:
        v = int(s, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address: {s!r}")
    if v < 0:
        raise argparse.ArgumentTypeError(f"address must be non-negative: {s!r}")
    return v


def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="qdhex", description="Print a hex dump of a file or of stdin")
    p.add_argument("input", type=Path, nargs="?", default=Path("-"), help="File to dump ('-' for stdin, the default)")
    p.add_argument("--base", type=_address, default=0, help="Address printed for the first byte (default: 0)")
    p.add_argument("--bare", action="store_true", help="Only hex pairs: no addresses, no ASCII column")

    # Logging
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--quiet", action="store_true", help="Drop level and logger name from log lines")

    args = p.parse_args(argv)

    sys.exit(
        run_app(
            input_path=args.input,
            base_addr=args.base,
            bare=args.bare,
            log_level=args.log_level,
            quiet=args.quiet,
        )
    )


if __name__ == "__main__":
    main()

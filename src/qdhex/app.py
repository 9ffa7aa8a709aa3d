from __future__ import annotations

from pathlib import Path

from qdhex.core.dump import bare_dump_string, formatted_dump_string
from qdhex.core.loader import STDIN_PATH, load_raw_bin
from qdhex.utils.logger import get_logger, setup_logging

log = get_logger(__name__)


def run_app(
    input_path: Path,
    base_addr: int,
    bare: bool,
    log_level: str,
    quiet: bool,
) -> int:
    setup_logging(level=log_level, quiet=quiet)

    source = "<stdin>" if input_path == STDIN_PATH else str(input_path)
    log.info("Input: %s base=0x%08x", source, base_addr)

    try:
        data = load_raw_bin(input_path)
    except OSError as e:
        log.error("cannot read %s: %s", source, e)
        return 1

    log.debug("read %d bytes", len(data))

    if bare:
        out = bare_dump_string(data)
    else:
        out = formatted_dump_string(base_addr, data)

    if out:
        print(out)
    return 0

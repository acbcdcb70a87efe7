from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Sequence

from merge_uses.exceptions import FormatterError

logger = logging.getLogger(__name__)

RUSTFMT = ('rustfmt',)


def run_rustfmt(
        contents: str,
        args: Sequence[str] = (),
        *,
        command: Sequence[str] = RUSTFMT,
) -> str:
    """Pipes `contents` through rustfmt and returns what it prints."""
    cmd = (*command, *args)
    logger.debug(f'running {shlex.join(cmd)}')
    try:
        proc = subprocess.run(
            cmd,
            input=contents.encode(),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise FormatterError(cmd, cause=e) from e

    if proc.returncode:
        stderr = proc.stderr.decode(errors='replace')
        raise FormatterError(cmd, returncode=proc.returncode, stderr=stderr)
    else:
        return proc.stdout.decode()

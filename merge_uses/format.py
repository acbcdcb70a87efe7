from __future__ import annotations

import logging

from merge_uses.classify import Settings
from merge_uses.parse import find_use_runs
from merge_uses.parse import parse
from merge_uses.sort import sort
from merge_uses.use_obj import UseItem

logger = logging.getLogger(__name__)


def _newline_at(src: bytes, pos: int) -> bytes:
    if src.startswith(b'\r\n', pos):
        return b'\r\n'
    else:
        return b'\n'


def _format_blocks(
        blocks: tuple[tuple[UseItem, ...], ...],
        newline: str = '\n',
) -> str:
    lines: list[str] = []
    for block in blocks:
        if lines:
            lines.append('')
        lines.extend(str(obj).rstrip('\n') for obj in block)
    # the text that followed the replaced run supplies the final newline
    return newline.join(lines)


def format_uses(contents: str, settings: Settings = Settings()) -> str:
    """Rewrites every run of top-level use declarations in `contents`.

    Everything outside of the runs is preserved byte for byte, except that a
    run which merges down to nothing also takes its line ending with it.
    Statements are separated with the line ending that followed the run.
    """
    src = contents.encode()
    root = parse(src)

    pieces = []
    last_end = 0
    for run in find_use_runs(root):
        logger.debug(
            f'merging {len(run.entries)} use declarations '
            f'at bytes {run.start}..{run.end}',
        )
        uses = [
            UseItem.from_tree_sitter(node, attrs=attrs)
            for attrs, node in run.entries
        ]
        newline = _newline_at(src, run.end)
        block = _format_blocks(sort(uses, settings=settings), newline.decode())
        pieces.append(src[last_end:run.start])
        pieces.append(block.encode())
        last_end = run.end
        if not block and src.startswith(newline, run.end):
            last_end += len(newline)
    pieces.append(src[last_end:])

    return b''.join(pieces).decode()

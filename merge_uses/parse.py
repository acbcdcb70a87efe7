from __future__ import annotations

import functools
from typing import Generator
from typing import NamedTuple

import tree_sitter_rust
from tree_sitter import Language
from tree_sitter import Node
from tree_sitter import Parser

from merge_uses.exceptions import ParseError

COMMENT_TYPES = frozenset(('line_comment', 'block_comment'))


@functools.lru_cache(maxsize=1)
def _parser() -> Parser:
    return Parser(Language(tree_sitter_rust.language()))


def node_text(node: Node) -> str:
    assert node.text is not None
    return node.text.decode()


def iter_descendants(node: Node) -> Generator[Node, None, None]:
    for child in node.children:
        yield child
        yield from iter_descendants(child)


def _first_error(node: Node) -> Node:
    for child in iter_descendants(node):
        if child.type == 'ERROR' or child.is_missing:
            return child
    else:
        return node


def parse(src: bytes) -> Node:
    """Parses Rust source, returning the `source_file` root node."""
    root = _parser().parse(src).root_node
    if root.has_error:
        error = _first_error(root)
        line, column = error.start_point[0], error.start_point[1]
        raise ParseError(line + 1, column + 1)
    return root


def is_outer_doc_comment(node: Node) -> bool:
    text = node_text(node)
    if node.type == 'line_comment':
        return text.startswith('///') and not text.startswith('////')
    else:
        return (
            text.startswith('/**') and
            not text.startswith('/***') and
            text != '/**/'
        )


class UseRun(NamedTuple):
    start: int
    end: int
    # (decorations, use_declaration node) for each declaration of the run
    entries: tuple[tuple[tuple[str, ...], Node], ...]


def find_use_runs(root: Node) -> tuple[UseRun, ...]:
    """Finds the runs of consecutive top-level use declarations.

    A run ends at the first item that is not a use declaration.  Comments do
    not end a run, but a comment inside a run is attached to the declaration
    that follows it, just as attributes and doc comments are.
    """
    runs = []
    entries: list[tuple[tuple[str, ...], Node]] = []
    decorations: list[Node] = []

    def _end_run() -> None:
        if entries:
            start = entries[0][1].start_byte
            end = entries[-1][1].end_byte
            runs.append(UseRun(start, end, tuple(entries)))
        entries.clear()
        decorations.clear()

    for child in root.named_children:
        if child.type == 'use_declaration':
            attrs = tuple(node_text(d).strip() for d in decorations)
            entries.append((attrs, child))
            decorations.clear()
        elif child.type == 'attribute_item':
            decorations.append(child)
        elif child.type in COMMENT_TYPES:
            if entries or is_outer_doc_comment(child):
                decorations.append(child)
        else:
            _end_run()
    _end_run()

    return tuple(runs)

from __future__ import annotations

from typing import Generator

from merge_uses.syntax import Name
from merge_uses.syntax import UseGroup
from merge_uses.syntax import UsePath
from merge_uses.syntax import UseTree

Pair = tuple[tuple[str, ...], Name]


def walk_use_tree(
        tree: UseTree,
        path: tuple[str, ...] = (),
) -> Generator[Pair, None, None]:
    """Decomposes a use tree into (path, leaf) pairs.

    Pairs come out depth first, left to right:

        std::{a, b::c, d::{e, f}}

    yields

        (('std',), a)
        (('std', 'b'), c)
        (('std', 'd'), e)
        (('std', 'd'), f)
    """
    if isinstance(tree, UsePath):
        yield from walk_use_tree(tree.tree, path + (tree.ident,))
    elif isinstance(tree, UseGroup):
        for item in tree.items:
            yield from walk_use_tree(item, path)
    else:
        yield path, tree

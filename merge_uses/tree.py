"""Prefix tree merging the (path, leaf) pairs of one import key.

Nodes live in an arena (a list) and refer to their children by index.  When
a plain-name leaf turns out to also be a prefix of a later import, its arena
slot is overwritten with an interior node; the parent keeps the same index,
so nothing else has to be patched.

    use std::a::c;
    use std::a;

merges into the tree

    std
    └── a (self)
        └── c

which serializes as `std::a::{self, c}`.
"""
from __future__ import annotations

import functools
from typing import Any
from typing import Iterable
from typing import NamedTuple
from typing import Union

from merge_uses.display import use_tree_to_s
from merge_uses.exceptions import UnsupportedUseError
from merge_uses.syntax import Name
from merge_uses.syntax import name_sort_key
from merge_uses.syntax import SELF
from merge_uses.syntax import UseGroup
from merge_uses.syntax import UseName
from merge_uses.syntax import UsePath
from merge_uses.syntax import UseRename
from merge_uses.syntax import UseTree
from merge_uses.walk import Pair


class Leaf(NamedTuple):
    name: Name


class Interior(NamedTuple):
    ident: str
    children: list[int]
    has_self: bool = False


Node = Union[Leaf, Interior]

ROOT = 0


class MergeTree:
    def __init__(self) -> None:
        self._nodes: list[Node] = [Interior('', [])]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> MergeTree:
        return functools.reduce(fold, pairs, cls())

    def _alloc(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def _set_self(self, handle: int) -> None:
        if handle == ROOT:
            raise UnsupportedUseError('`self` cannot be imported at the root')
        self._nodes[handle] = self._nodes[handle]._replace(has_self=True)

    def _descend(self, parent: int, segment: str) -> int:
        children = self._nodes[parent].children
        for handle in children:
            node = self._nodes[handle]
            if isinstance(node, Interior) and node.ident == segment:
                return handle
            elif node == Leaf(UseName(segment)):
                # `a` was imported on its own and is now also a prefix
                self._nodes[handle] = Interior(segment, [], has_self=True)
                return handle

        handle = self._alloc(Interior(segment, []))
        children.append(handle)
        return handle

    def _add_leaf(self, parent: int, name: Name) -> None:
        if isinstance(name, UseName) and name.ident == SELF:
            self._set_self(parent)
            return
        elif isinstance(name, UseRename) and name.ident == SELF:
            if parent == ROOT:
                raise UnsupportedUseError(
                    '`self` cannot be imported at the root',
                )

        children = self._nodes[parent].children
        for handle in children:
            node = self._nodes[handle]
            if node == Leaf(name):
                return
            elif (
                    isinstance(node, Interior) and
                    isinstance(name, UseName) and
                    node.ident == name.ident
            ):
                self._set_self(handle)
                return

        children.append(self._alloc(Leaf(name)))

    def insert(self, path: tuple[str, ...], name: Name) -> None:
        handle = ROOT
        for segment in path:
            handle = self._descend(handle, segment)
        self._add_leaf(handle, name)

    def _sort_key(self, handle: int) -> tuple[int, str, str]:
        node = self._nodes[handle]
        if isinstance(node, Interior):
            return (3, node.ident, '')
        else:
            return name_sort_key(node.name)

    def _sorted(self, handles: list[int]) -> list[int]:
        return sorted(handles, key=self._sort_key)

    def _to_use_tree(self, handle: int) -> UseTree:
        node = self._nodes[handle]
        if isinstance(node, Leaf):
            return node.name

        items = [self._to_use_tree(h) for h in self._sorted(node.children)]
        if node.has_self:
            items.insert(0, UseName(SELF))
        elif len(items) == 1:
            return UsePath(node.ident, items[0])
        return UsePath(node.ident, UseGroup(tuple(items)))

    def top_level(self) -> tuple[UseTree, ...]:
        root = self._nodes[ROOT]
        return tuple(self._to_use_tree(h) for h in self._sorted(root.children))

    def to_use_tree(self) -> UseTree:
        trees = self.top_level()
        if len(trees) == 1:
            return trees[0]
        else:
            return UseGroup(trees)

    def _canonical(self, handle: int) -> Any:
        node = self._nodes[handle]
        if isinstance(node, Leaf):
            return node.name
        else:
            children = frozenset(self._canonical(h) for h in node.children)
            return (node.ident, node.has_self, children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergeTree):
            return NotImplemented
        else:
            return self._canonical(ROOT) == other._canonical(ROOT)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({use_tree_to_s(self.to_use_tree())!r})'


def fold(tree: MergeTree, pair: Pair) -> MergeTree:
    path, name = pair
    tree.insert(path, name)
    return tree

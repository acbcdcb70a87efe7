from __future__ import annotations

import functools

from cached_property import cached_property
from tree_sitter import Node

from merge_uses.classify import ImportKey
from merge_uses.classify import key_of
from merge_uses.display import use_item_to_s
from merge_uses.exceptions import UnsupportedUseError
from merge_uses.parse import COMMENT_TYPES
from merge_uses.parse import iter_descendants
from merge_uses.parse import node_text
from merge_uses.parse import parse
from merge_uses.syntax import INHERITED
from merge_uses.syntax import PUBLIC
from merge_uses.syntax import UseGlob
from merge_uses.syntax import UseGroup
from merge_uses.syntax import UseName
from merge_uses.syntax import UsePath
from merge_uses.syntax import UseRename
from merge_uses.syntax import UseTree
from merge_uses.syntax import Visibility
from merge_uses.syntax import VisibilityKind
from merge_uses.walk import Pair
from merge_uses.walk import walk_use_tree

# node types that are a single path segment: `foo`, `self`, `super`, `crate`
_SEGMENT_TYPES = frozenset(('identifier', 'self', 'super', 'crate'))


def _path_from_node(node: Node) -> tuple[bool, tuple[str, ...]]:
    """Returns (leading `::`, segments) for a (possibly scoped) path."""
    if node.type in _SEGMENT_TYPES:
        return False, (node_text(node),)
    elif node.type == 'scoped_identifier':
        path = node.child_by_field_name('path')
        name = node.child_by_field_name('name')
        assert name is not None
        if path is None:  # `::std`
            leading_colon, segments = True, ()
        else:
            leading_colon, segments = _path_from_node(path)
        return leading_colon, segments + (node_text(name),)
    else:
        raise UnsupportedUseError(f'unsupported path: {node_text(node)!r}')


def _nest(segments: tuple[str, ...], tree: UseTree) -> UseTree:
    for segment in reversed(segments):
        tree = UsePath(segment, tree)
    return tree


def _group_from_node(node: Node) -> UseGroup:
    items = []
    for child in node.named_children:
        leading_colon, tree = _use_tree_from_node(child)
        if leading_colon:
            raise UnsupportedUseError(
                f'leading `::` inside a group: {node_text(node)!r}',
            )
        items.append(tree)
    return UseGroup(tuple(items))


def _use_tree_from_node(node: Node) -> tuple[bool, UseTree]:
    """Returns (leading `::`, use tree) for a tree-sitter use clause."""
    if node.type == 'use_list':
        return False, _group_from_node(node)
    elif node.type == 'scoped_use_list':
        path = node.child_by_field_name('path')
        use_list = node.child_by_field_name('list')
        assert use_list is not None
        if path is None:  # `::{a, b}`
            leading_colon, segments = True, ()
        else:
            leading_colon, segments = _path_from_node(path)
        return leading_colon, _nest(segments, _group_from_node(use_list))
    elif node.type == 'use_wildcard':
        leading_colon, segments = False, ()
        for child in node.children:
            if child.is_named:
                leading_colon, segments = _path_from_node(child)
            elif child.type == '::' and not segments:  # `::*`
                leading_colon = True
        return leading_colon, _nest(segments, UseGlob())
    elif node.type == 'use_as_clause':
        path = node.child_by_field_name('path')
        alias = node.child_by_field_name('alias')
        assert path is not None and alias is not None
        leading_colon, segments = _path_from_node(path)
        leaf = UseRename(segments[-1], node_text(alias))
        return leading_colon, _nest(segments[:-1], leaf)
    else:
        leading_colon, segments = _path_from_node(node)
        return leading_colon, _nest(segments[:-1], UseName(segments[-1]))


def _visibility_from_node(node: Node | None) -> Visibility:
    if node is None:
        return INHERITED
    elif node.children[0].type != 'pub':
        raise UnsupportedUseError(f'unsupported visibility: {node_text(node)}')
    elif len(node.children) == 1:
        return PUBLIC

    in_token = any(child.type == 'in' for child in node.children)
    path = next(child for child in node.children if child.is_named)
    leading_colon, segments = _path_from_node(path)
    return Visibility(
        VisibilityKind.RESTRICTED, in_token, leading_colon, segments,
    )


class UseItem:
    def __init__(
            self,
            vis: Visibility,
            leading_colon: bool,
            tree: UseTree,
            attrs: tuple[str, ...] = (),
    ) -> None:
        self.vis = vis
        self.leading_colon = leading_colon
        self.tree = tree
        # attributes and comments attached to the declaration
        self.attrs = attrs

    @classmethod
    def from_tree_sitter(
            cls,
            node: Node,
            attrs: tuple[str, ...] = (),
    ) -> UseItem:
        if node.type != 'use_declaration':
            raise AssertionError(
                f'Expected node of type use_declaration but got {node.type!r}',
            )

        for child in iter_descendants(node):
            if child.type in COMMENT_TYPES:
                raise UnsupportedUseError(
                    f'comment inside use declaration: {node_text(node)!r}',
                )

        vis_node = next(
            (c for c in node.children if c.type == 'visibility_modifier'),
            None,
        )
        argument = node.child_by_field_name('argument')
        assert argument is not None
        leading_colon, tree = _use_tree_from_node(argument)
        return cls(
            _visibility_from_node(vis_node), leading_colon, tree,
            attrs=attrs,
        )

    @cached_property
    def key(self) -> ImportKey:
        return key_of(self)

    @cached_property
    def pairs(self) -> tuple[Pair, ...]:
        return tuple(walk_use_tree(self.tree))

    def __hash__(self) -> int:
        return hash((self.key, self.tree, self.attrs))

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, UseItem) and
            (self.key, self.tree, self.attrs) ==
            (other.key, other.tree, other.attrs)
        )

    def __str__(self) -> str:
        return f'{use_item_to_s(self.vis, self.leading_colon, self.tree)}\n'

    def __repr__(self) -> str:
        return f'use_obj_from_str({str(self)!r})'


@functools.lru_cache(maxsize=None)
def use_obj_from_str(s: str) -> UseItem:
    root = parse(s.encode())
    nodes = root.named_children
    if len(nodes) != 1:
        raise AssertionError(f'Expected one use declaration but got {s!r}')
    return UseItem.from_tree_sitter(nodes[0])

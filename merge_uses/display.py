from __future__ import annotations

from merge_uses.syntax import UseGlob
from merge_uses.syntax import UseGroup
from merge_uses.syntax import UseName
from merge_uses.syntax import UsePath
from merge_uses.syntax import UseRename
from merge_uses.syntax import UseTree
from merge_uses.syntax import Visibility
from merge_uses.syntax import VisibilityKind


def _leading_colon_to_s(leading_colon: bool) -> str:
    return '::' if leading_colon else ''


def path_to_s(leading_colon: bool, segments: tuple[str, ...]) -> str:
    return _leading_colon_to_s(leading_colon) + '::'.join(segments)


def visibility_to_s(vis: Visibility) -> str:
    if vis.kind == VisibilityKind.PUBLIC:
        return 'pub '
    elif vis.kind == VisibilityKind.RESTRICTED:
        in_s = 'in ' if vis.in_token else ''
        return f'pub({in_s}{path_to_s(vis.leading_colon, vis.segments)}) '
    else:
        return ''


def use_tree_to_s(tree: UseTree) -> str:
    if isinstance(tree, UsePath):
        return f'{tree.ident}::{use_tree_to_s(tree.tree)}'
    elif isinstance(tree, UseName):
        return tree.ident
    elif isinstance(tree, UseRename):
        return f'{tree.ident} as {tree.rename}'
    elif isinstance(tree, UseGlob):
        return '*'
    elif isinstance(tree, UseGroup):
        return '{{{}}}'.format(', '.join(use_tree_to_s(t) for t in tree.items))
    else:
        raise AssertionError(f'Expected a use tree but got {tree!r}')


def use_item_to_s(vis: Visibility, leading_colon: bool, tree: UseTree) -> str:
    return (
        f'{visibility_to_s(vis)}use '
        f'{_leading_colon_to_s(leading_colon)}{use_tree_to_s(tree)};'
    )

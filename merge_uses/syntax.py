from __future__ import annotations

from typing import NamedTuple
from typing import Union


class UseName(NamedTuple):
    ident: str


class UseRename(NamedTuple):
    ident: str
    rename: str


class UseGlob(NamedTuple):
    pass


class UsePath(NamedTuple):
    ident: str
    tree: UseTree


class UseGroup(NamedTuple):
    items: tuple[UseTree, ...]


Name = Union[UseName, UseRename, UseGlob]
UseTree = Union[UseName, UseRename, UseGlob, UsePath, UseGroup]

SELF = 'self'


def name_sort_key(name: Name) -> tuple[int, str, str]:
    """Orders leaf names: `self` (renamed or not), names, renames, wildcards.

    Rank 3 is left free for interior nodes, which sort after every named leaf.
    """
    if isinstance(name, UseGlob):
        return (4, '', '')
    elif name.ident == SELF:
        rename = name.rename if isinstance(name, UseRename) else ''
        return (0, name.ident, rename)
    elif isinstance(name, UseRename):
        return (2, name.ident, name.rename)
    else:
        return (1, name.ident, '')


class VisibilityKind:
    INHERITED = 'INHERITED'
    RESTRICTED = 'RESTRICTED'
    PUBLIC = 'PUBLIC'

    order = (INHERITED, RESTRICTED, PUBLIC)


class Visibility(NamedTuple):
    kind: str = VisibilityKind.INHERITED
    # `pub(in path)` as opposed to `pub(crate)` / `pub(self)` / `pub(super)`
    in_token: bool = False
    leading_colon: bool = False
    segments: tuple[str, ...] = ()

    @property
    def sort_key(self) -> tuple[int, bool, bool, tuple[str, ...]]:
        return (
            VisibilityKind.order.index(self.kind),
            self.in_token, self.leading_colon, self.segments,
        )


INHERITED = Visibility()
PUBLIC = Visibility(VisibilityKind.PUBLIC)

from __future__ import annotations

import functools
from typing import NamedTuple
from typing import TYPE_CHECKING

from merge_uses.syntax import Name
from merge_uses.syntax import UseGlob
from merge_uses.syntax import Visibility

if TYPE_CHECKING:
    from merge_uses.use_obj import UseItem


class Category:
    STD = 'STD'
    EXTERNAL = 'EXTERNAL'
    CRATE = 'CRATE'

    order = (STD, EXTERNAL, CRATE)


_STATIC_CLASSIFICATIONS = {
    'std': Category.STD,
    'core': Category.STD,
    'alloc': Category.STD,
    # paths relative to the current crate: `use super::foo;`
    'self': Category.CRATE,
    'super': Category.CRATE,
    'crate': Category.CRATE,
}


class Settings(NamedTuple):
    application_crates: frozenset[str] = frozenset()
    split_roots: bool = False


@functools.lru_cache(maxsize=None)
def classify_base(base: str, settings: Settings = Settings()) -> str:
    try:
        return _STATIC_CLASSIFICATIONS[base]
    except KeyError:
        pass

    if base in settings.application_crates:
        return Category.CRATE
    else:
        return Category.EXTERNAL


def category_of(
        path: tuple[str, ...],
        name: Name,
        settings: Settings = Settings(),
) -> str:
    """Classifies one (path, leaf) pair by its first identifier.

    The first path segment decides; a bare leaf (`use serde;`) is classified
    by its own identifier.  A wildcard has no identifier to inspect and is
    always external.
    """
    if path:
        base = path[0]
    elif isinstance(name, UseGlob):
        return Category.EXTERNAL
    else:
        base = name.ident
    return classify_base(base, settings=settings)


class ImportKey(NamedTuple):
    vis: Visibility
    leading_colon: bool

    @property
    def sort_key(self) -> tuple[tuple[int, bool, bool, tuple[str, ...]], bool]:
        return (self.vis.sort_key, self.leading_colon)


def key_of(obj: UseItem) -> ImportKey:
    return ImportKey(obj.vis, obj.leading_colon)

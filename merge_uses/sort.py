from __future__ import annotations

import collections
import operator
from typing import Iterable

from merge_uses.classify import category_of
from merge_uses.classify import Category
from merge_uses.classify import ImportKey
from merge_uses.classify import Settings
from merge_uses.exceptions import UnsupportedUseError
from merge_uses.tree import MergeTree
from merge_uses.use_obj import UseItem
from merge_uses.walk import Pair


def sort(
        uses: Iterable[UseItem],
        settings: Settings = Settings(),
) -> tuple[tuple[UseItem, ...], ...]:
    """Merge use declarations into one block per category.

    For example:

        use crate::foo::Bar;
        use std::io;
        use serde::Serialize;
        use std::io::Write;
        pub use std::fmt;

    becomes:

        use std::io::{self, Write};
        pub use std::fmt;

        use serde::Serialize;

        use crate::foo::Bar;
    """
    # Partition the (path, leaf) pairs
    partitioned: dict[str, dict[ImportKey, list[Pair]]]
    partitioned = collections.defaultdict(
        lambda: collections.defaultdict(list),
    )
    for obj in uses:
        if obj.attrs:
            raise UnsupportedUseError(
                f'decorated use declarations are not supported: '
                f'{" ".join(obj.attrs)} {str(obj).strip()}',
            )

        for path, name in obj.pairs:
            tp = category_of(path, name, settings=settings)
            partitioned[tp][obj.key].append((path, name))

    # merge each of the segments
    sortkey = operator.attrgetter('sort_key')
    ret = []
    for tp in Category.order:
        if tp not in partitioned:
            continue

        block = []
        for key in sorted(partitioned[tp], key=sortkey):
            tree = MergeTree.from_pairs(partitioned[tp][key])
            if settings.split_roots:
                trees = tree.top_level()
            else:
                trees = (tree.to_use_tree(),)
            block.extend(
                UseItem(key.vis, key.leading_colon, t) for t in trees
            )
        ret.append(tuple(block))

    return tuple(ret)

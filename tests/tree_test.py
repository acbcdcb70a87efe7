from __future__ import annotations

import itertools

import pytest

from merge_uses.display import use_tree_to_s
from merge_uses.exceptions import UnsupportedUseError
from merge_uses.syntax import UseGlob
from merge_uses.syntax import UseName
from merge_uses.syntax import UseRename
from merge_uses.tree import fold
from merge_uses.tree import MergeTree


def _s(tree):
    return use_tree_to_s(tree.to_use_tree())


def test_merges_shared_prefixes():
    tree = MergeTree.from_pairs((
        (('std',), UseName('a')),
        (('std', 'b'), UseName('c')),
        (('std', 'b'), UseName('d')),
        (('std', 'b'), UseName('e')),
    ))
    assert _s(tree) == 'std::{a, b::{c, d, e}}'


@pytest.mark.parametrize(
    'pairs',
    (
        ((('std', 'a'), UseName('c')), (('std',), UseName('a'))),
        ((('std',), UseName('a')), (('std', 'a'), UseName('c'))),
    ),
)
def test_prefix_also_imported_becomes_self(pairs):
    assert _s(MergeTree.from_pairs(pairs)) == 'std::a::{self, c}'


def test_promotion_at_the_root():
    tree = MergeTree.from_pairs((
        ((), UseName('a')),
        (('a',), UseName('b')),
    ))
    assert _s(tree) == 'a::{self, b}'


def test_explicit_self():
    tree = MergeTree.from_pairs(((('a',), UseName('self')),))
    assert _s(tree) == 'a::{self}'


def test_explicit_self_and_plain_name_merge():
    tree1 = MergeTree.from_pairs((
        (('a',), UseName('self')),
        (('a',), UseName('b')),
    ))
    tree2 = MergeTree.from_pairs((
        ((), UseName('a')),
        (('a',), UseName('b')),
    ))
    assert tree1 == tree2


def test_single_child_collapses_to_a_path():
    tree = MergeTree.from_pairs(((('a', 'b'), UseName('c')),))
    assert _s(tree) == 'a::b::c'


def test_single_interior_child_collapses_to_a_path():
    tree = MergeTree.from_pairs((
        (('a', 'b'), UseName('c')),
        (('a', 'b'), UseName('d')),
    ))
    assert _s(tree) == 'a::b::{c, d}'


def test_duplicate_leaves_are_deduplicated():
    pair = (('a',), UseName('b'))
    tree = MergeTree.from_pairs((pair, pair))
    assert tree == MergeTree.from_pairs((pair,))
    assert _s(tree) == 'a::b'


def test_duplicate_renames_are_deduplicated():
    pair = (('a',), UseRename('b', 'c'))
    assert _s(MergeTree.from_pairs((pair, pair))) == 'a::b as c'


def test_rename_is_not_promoted():
    tree = MergeTree.from_pairs((
        ((), UseRename('a', 'x')),
        (('a',), UseName('b')),
    ))
    assert _s(tree) == '{a as x, a::b}'
    assert tuple(use_tree_to_s(t) for t in tree.top_level()) == (
        'a as x', 'a::b',
    )


def test_canonical_sibling_order():
    tree = MergeTree.from_pairs((
        (('a',), UseGlob()),
        (('a',), UseName('m')),
        (('a', 'c'), UseName('d')),
        (('a',), UseRename('b', 'c')),
        (('a',), UseName('B')),
        (('a',), UseName('b')),
        (('a',), UseName('self')),
    ))
    assert _s(tree) == 'a::{self, B, b, m, b as c, c::d, *}'


def test_renames_sort_after_plain_names():
    tree = MergeTree.from_pairs((
        (('a',), UseRename('b', 'c')),
        (('a',), UseName('m')),
        (('a', 'z'), UseName('y')),
        (('a',), UseRename('self', 'x')),
    ))
    assert _s(tree) == 'a::{self as x, m, b as c, z::y}'


def test_self_rename_sorts_first():
    tree = MergeTree.from_pairs((
        (('a',), UseName('b')),
        (('a',), UseRename('self', 'x')),
    ))
    assert _s(tree) == 'a::{self as x, b}'


PAIRS = (
    ((), UseName('a')),
    (('a',), UseName('b')),
    (('a', 'b'), UseName('c')),
    (('a',), UseRename('d', 'e')),
    (('a',), UseGlob()),
    (('f',), UseName('g')),
)


def test_insertion_order_does_not_matter():
    expected = MergeTree.from_pairs(PAIRS)
    for pairs in itertools.permutations(PAIRS):
        tree = MergeTree.from_pairs(pairs)
        assert tree == expected
        assert _s(tree) == _s(expected)


def test_serialization():
    tree = MergeTree.from_pairs(PAIRS)
    assert _s(tree) == '{a::{self, d as e, b::{self, c}, *}, f::g}'


def test_trees_with_different_self_leaves_differ():
    tree1 = MergeTree.from_pairs(((('a',), UseName('b')),))
    tree2 = MergeTree.from_pairs((
        (('a',), UseName('b')),
        ((), UseName('a')),
    ))
    assert tree1 != tree2


def test_empty_trees_are_equal():
    assert MergeTree() == MergeTree()


def test_fold_returns_the_tree():
    tree = MergeTree()
    assert fold(tree, (('a',), UseName('b'))) is tree
    assert _s(tree) == 'a::b'


@pytest.mark.parametrize('name', (UseName('self'), UseRename('self', 'x')))
def test_self_at_the_root_is_unsupported(name):
    with pytest.raises(UnsupportedUseError):
        MergeTree.from_pairs((((), name),))


def test_repr():
    tree = MergeTree.from_pairs(((('a',), UseName('b')),))
    assert repr(tree) == "MergeTree('a::b')"

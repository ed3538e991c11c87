"""Unit tests for descendant counting."""

from structview.core.accessor import children
from structview.core.counter import DescendantCounter, count_descendants


def _chain(length):
    node = {"id": "leaf"}
    for i in range(length):
        node = {"id": f"n{i}", "children": [node]}
    return node


class TestCountDescendants:
    def test_leaf_is_zero(self):
        assert count_descendants({"id": "x"}) == 0

    def test_matches_recursive_definition(self, root_node):
        def check(node):
            kids = children(node)
            assert count_descendants(node) == len(kids) + sum(count_descendants(k) for k in kids)
            for kid in kids:
                check(kid)

        check(root_node)
        assert count_descendants(root_node) == 3 + 5 + 2 + 5

    def test_components_are_counted(self):
        assert count_descendants({"components": [{}, {"children": [{}]}]}) == 3

    def test_deep_chain_does_not_recurse(self):
        assert count_descendants(_chain(5000)) == 5000


class TestDescendantCounter:
    def test_agrees_with_plain_function(self, root_node):
        counter = DescendantCounter()
        for node in [root_node, *children(root_node)]:
            assert counter.count(node) == count_descendants(node)

    def test_whole_subtree_is_memoized(self, root_node):
        counter = DescendantCounter()
        counter.count(root_node)
        # root + A,B,C + 5 + 2 + c1,c2 + 3
        assert len(counter) == 1 + 3 + 5 + 2 + 2 + 3

    def test_memo_is_keyed_by_identity_not_equality(self):
        counter = DescendantCounter()
        first = {"children": [{}]}
        twin = {"children": [{}]}
        assert counter.count(first) == 1
        assert counter.count(twin) == 1
        assert len(counter) == 4

    def test_clear(self, root_node):
        counter = DescendantCounter()
        counter.count(root_node)
        counter.clear()
        assert len(counter) == 0

    def test_deep_chain(self):
        assert DescendantCounter().count(_chain(5000)) == 5000

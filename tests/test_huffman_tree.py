import pytest

from huffpack.encoding_schemes.frequency import count_frequencies
from huffpack.encoding_schemes.huffman_tree import HuffmanNode, build_huffman_tree
from huffpack.errors import EmptyInputError


def _leaves(node):
    if node.is_leaf:
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def test_count_frequencies_full_sequence():
    freqs = count_frequencies("abracadabra")
    assert freqs == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}
    # first-occurrence order drives tie-breaking
    assert list(freqs) == ["a", "b", "r", "c", "d"]


def test_count_frequencies_legacy_window_skips_last_symbol():
    assert count_frequencies("aab", exclude_last=True) == {"a": 2}
    assert count_frequencies("abab", exclude_last=True) == {"a": 2, "b": 1}


def test_count_frequencies_empty_and_bytes():
    assert count_frequencies("") == {}
    assert count_frequencies("", exclude_last=True) == {}
    assert count_frequencies(b"\x00\x00\xff") == {0: 2, 255: 1}


def test_empty_table_raises():
    with pytest.raises(EmptyInputError):
        build_huffman_tree({})


def test_non_positive_count_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree({"a": 0, "b": 1})


def test_single_entry_gives_single_leaf():
    root = build_huffman_tree({"a": 3})
    assert root.is_leaf
    assert root.symbol == "a"
    assert root.weight == 3


def test_internal_nodes_have_two_children_and_summed_weight():
    freqs = count_frequencies("the quick brown fox jumps over the lazy dog")
    root = build_huffman_tree(freqs)
    assert root.weight == sum(freqs.values())

    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            continue
        assert node.symbol is None
        assert node.weight == node.left.weight + node.right.weight
        stack.extend([node.left, node.right])

    assert sorted(leaf.symbol for leaf in _leaves(root)) == sorted(freqs)


def test_equal_weights_merge_in_insertion_order():
    root = build_huffman_tree({"a": 1, "b": 1, "c": 1, "d": 1})
    assert [leaf.symbol for leaf in _leaves(root)] == ["a", "b", "c", "d"]
    assert [root.left.left.symbol, root.left.right.symbol] == ["a", "b"]


def test_older_node_wins_tie_against_merged_node():
    # c+b merge to weight 3, which ties with leaf 'a'; 'a' is older so it goes left
    root = build_huffman_tree({"a": 3, "b": 2, "c": 1})
    assert root.left.is_leaf and root.left.symbol == "a"
    assert root.right.left.symbol == "c"
    assert root.right.right.symbol == "b"


def test_tree_is_reproducible():
    freqs = {"x": 2, "y": 2, "z": 2, "w": 2, "v": 1}
    first = [leaf.symbol for leaf in _leaves(build_huffman_tree(freqs))]
    second = [leaf.symbol for leaf in _leaves(build_huffman_tree(dict(freqs)))]
    assert first == second


def test_node_ordering_uses_weight_then_creation_order():
    assert HuffmanNode(weight=1, order=5) < HuffmanNode(weight=2, order=0)
    assert HuffmanNode(weight=2, order=0) < HuffmanNode(weight=2, order=1)
    assert not HuffmanNode(weight=2, order=1) < HuffmanNode(weight=2, order=1)

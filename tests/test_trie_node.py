# tests/test_trie_node.py
from __future__ import annotations

import pytest

# Module under test
from phrase_trie.trie import node as T

"""
Tests: trie/node.py

Goals:
- Construction (new/default), phrase ingestion, idempotence, monotonic growth
- step_down / names_at_path lookups and absence
- span_map (one level) vs depth_map (whole subtree)
- from_corpus end-to-end
"""

TrieNode = T.TrieNode


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def abc_trie():
    """Three sentences sharing the prefix 'a b'."""
    return TrieNode.from_corpus("a b c. a b d. a b e")


# ─────────────────────────────────────────────────────────────────────────────
# Construction & ingestion
# ─────────────────────────────────────────────────────────────────────────────

def test_default_is_childless_root():
    root = TrieNode.default()
    assert root.name == T.ROOT_NAME == "root"
    assert root.children == {}


def test_new_uses_given_name():
    node = TrieNode.new("Gerald")
    assert node.name == "Gerald"
    assert len(node) == 0


def test_add_phrase_of_length_one_and_two():
    root = TrieNode.default()
    root.add_phrase(["a"])
    assert root.children_names() == ["a"]

    root = TrieNode.default()
    root.add_phrase(["a", "b"])
    assert root.name == "root"
    assert root.children_names() == ["a"]
    assert root.step_down("a").children_names() == ["b"]


def test_add_empty_phrase_is_noop():
    root = TrieNode.default()
    root.add_phrase([])
    assert root == TrieNode.default()


def test_child_key_matches_child_name():
    root = TrieNode.from_corpus("the cat sat. the dog ran")
    stack = [root]
    while stack:
        node = stack.pop()
        for key, child in node.children.items():
            assert key == child.name
            stack.append(child)


def test_add_phrase_is_idempotent():
    once = TrieNode.default()
    once.add_phrase(["a", "b", "c"])

    twice = TrieNode.default()
    twice.add_phrase(["a", "b", "c"])
    b_node = twice.step_down("a").step_down("b")
    twice.add_phrase(["a", "b", "c"])

    assert once == twice
    # no node was replaced
    assert twice.step_down("a").step_down("b") is b_node


def test_ingestion_is_monotonic():
    root = TrieNode.default()
    root.add_phrase(["a", "b"])
    before = {name: set(root.names_at_path([name])) for name in root.children_names()}

    root.add_phrase(["a", "c"])
    root.add_phrase(["x"])

    for name, kids in before.items():
        assert kids <= set(root.names_at_path([name]))
    assert set(root.children_names()) == {"a", "x"}


def test_ingests_multiple_phrases():
    root = TrieNode.default()
    root.add_phrase(["a", "b"])
    root.add_phrase(["a", "c"])
    assert root.children_names() == ["a"]
    a_node = root.step_down("a")
    assert sorted(a_node.children_names()) == ["b", "c"]


# ─────────────────────────────────────────────────────────────────────────────
# Lookup
# ─────────────────────────────────────────────────────────────────────────────

def test_step_down_present_and_absent():
    root = TrieNode.default()
    root.add_phrase(["a", "b"])
    assert root.step_down("a").children_names() == ["b"]
    assert root.step_down("c") is None


def test_step_down_does_not_mutate():
    root = TrieNode.default()
    root.add_phrase(["a"])
    root.step_down("zzz")
    assert root.children_names() == ["a"]


def test_names_at_path_finds_continuations(abc_trie):
    assert set(abc_trie.names_at_path(["a", "b"])) == {"c", "d", "e"}


def test_names_at_path_empty_path_returns_own_children(abc_trie):
    assert set(abc_trie.names_at_path([])) == {"a", "b", "c", "d", "e"}


def test_names_at_path_leaf_is_empty_not_none(abc_trie):
    assert abc_trie.names_at_path(["a", "b", "c"]) == []


def test_names_at_path_absent(abc_trie):
    assert abc_trie.names_at_path(["a", "b", "d", "f"]) is None
    assert abc_trie.names_at_path(["zzz"]) is None
    # 'a' never starts after 'b'
    assert abc_trie.names_at_path(["b", "a"]) is None


@pytest.mark.parametrize(
    "phrase",
    [["a"], ["a", "b"], ["x", "y", "z", "w"], ["same", "same", "same"]],
)
def test_last_token_is_reachable_from_its_prefix(phrase):
    root = TrieNode.default()
    root.add_phrase(phrase)
    assert phrase[-1] in root.names_at_path(phrase[:-1])


def test_mid_sentence_prefix_is_answerable():
    root = TrieNode.from_corpus("the quick brown fox")
    assert root.names_at_path(["quick"]) == ["brown"]
    assert root.names_at_path(["brown", "fox"]) == []


def test_contains_and_len(abc_trie):
    assert "a" in abc_trie
    assert "zzz" not in abc_trie
    assert len(abc_trie) == 5


# ─────────────────────────────────────────────────────────────────────────────
# from_corpus
# ─────────────────────────────────────────────────────────────────────────────

def test_from_corpus_ingests_every_suffix():
    t = TrieNode.from_corpus("a b! c d. a, c? b: d;")

    assert set(t.children_names()) == {"a", "b", "c", "d"}
    assert set(t.step_down("a").children_names()) == {"b", "c"}
    assert t.step_down("b").children_names() == ["d"]
    assert t.step_down("c").children_names() == ["d"]
    assert t.step_down("d").children_names() == []
    assert t.step_down("a").step_down("a") is None


def test_from_corpus_never_crosses_sentences():
    t = TrieNode.from_corpus("a b. c d")
    assert t.names_at_path(["b"]) == []
    assert t.names_at_path(["b", "c"]) is None


def test_from_corpus_empty():
    assert TrieNode.from_corpus("") == TrieNode.default()
    assert TrieNode.from_corpus(" . ; ") == TrieNode.default()


# ─────────────────────────────────────────────────────────────────────────────
# Analytics
# ─────────────────────────────────────────────────────────────────────────────

def test_span_map(abc_trie):
    assert abc_trie.span_map() == {"a": 1, "b": 3, "c": 0, "d": 0, "e": 0}


def test_depth_map():
    t = TrieNode.from_corpus("a. a b. b c d e.")
    assert t.depth_map() == {"a": 1, "b": 3, "c": 2, "d": 1, "e": 0}


def test_span_and_depth_agree_on_leaf_children():
    root = TrieNode.default()
    root.add_phrase(["c"])
    assert root.span_map() == {"c": 0}
    assert root.depth_map() == {"c": 0}


def test_span_is_shallow_depth_is_deep():
    root = TrieNode.default()
    root.add_phrase(["c", "d", "e"])
    assert root.span_map()["c"] == 1
    assert root.depth_map()["c"] == 2


def test_depth_of_node():
    assert TrieNode.new("x").depth() == 0
    root = TrieNode.default()
    root.add_phrase(["a", "b"])
    root.add_phrase(["c", "d", "e", "f"])
    assert root.depth() == 4


def test_depth_handles_very_long_sentence():
    root = TrieNode.default()
    root.add_phrase([f"w{i}" for i in range(3000)])
    assert root.depth() == 3000


def test_maps_on_empty_trie():
    root = TrieNode.default()
    assert root.span_map() == {}
    assert root.depth_map() == {}


def test_repr_and_unhashable():
    root = TrieNode.default()
    root.add_phrase(["b"])
    root.add_phrase(["a"])
    assert repr(root) == "TrieNode(name='root', children=['a', 'b'])"
    with pytest.raises(TypeError):
        hash(root)

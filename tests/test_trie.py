import pytest

from lexicon import LexiconTrie


def test_scenario_insert(lexicon):
    assert lexicon.num_words() == 3
    assert list(lexicon.words()) == ["car", "cart", "cat"]


def test_scenario_prefix(lexicon):
    assert lexicon.contains_prefix("ca") is True
    assert lexicon.contains_word("ca") is False


def test_scenario_delete(lexicon):
    assert lexicon.remove_word("car") is True
    assert lexicon.num_words() == 2
    assert lexicon.contains_word("car") is False
    assert lexicon.contains_word("cart") is True
    assert list(lexicon.words()) == ["cart", "cat"]


def test_add_is_idempotent():
    lex = LexiconTrie()
    assert lex.add_word("dog") is True
    assert lex.add_word("dog") is False
    assert lex.num_words() == 1
    assert list(lex.words()) == ["dog"]


def test_add_lowercases():
    lex = LexiconTrie()
    assert lex.add_word("Dog") is True
    assert lex.add_word("DOG") is False
    assert lex.contains_word("dog")
    assert "DoG" in lex


def test_add_words_counts_new_only():
    lex = LexiconTrie()
    assert lex.add_words(["a", "b", "a", "c"]) == 3
    assert len(lex) == 3


def test_remove_absent_leaves_trie_unchanged(lexicon):
    assert lexicon.remove_word("ca") is False
    assert lexicon.remove_word("dog") is False
    assert lexicon.remove_word("carts") is False
    assert lexicon.num_words() == 3
    assert list(lexicon.words()) == ["car", "cart", "cat"]


def test_remove_prunes_unneeded_prefix():
    lex = LexiconTrie(["cat", "catalog"])
    lex.remove_word("catalog")
    node = lex.root.get_child("c").get_child("a").get_child("t")
    assert node.is_leafless()
    assert lex.contains_prefix("cata") is False


def test_remove_keeps_shared_prefix():
    lex = LexiconTrie(["bat", "batch", "bath"])
    assert lex.remove_word("batch")
    assert lex.contains_prefix("batc") is False
    assert lex.contains_word("bath")
    assert lex.remove_word("bat")
    assert lex.contains_word("bath")
    assert lex.contains_prefix("bat")


def test_remove_last_word_empties_tree():
    lex = LexiconTrie(["hello"])
    lex.remove_word("hello")
    assert lex.root.is_leafless()
    assert lex.num_words() == 0
    assert list(lex.words()) == []


def test_insert_then_delete_restores_state(lexicon):
    before = list(lexicon.words())
    lexicon.add_word("dog")
    lexicon.remove_word("dog")
    assert list(lexicon.words()) == before
    assert lexicon.num_words() == 3
    assert lexicon.root.get_child("d") is None


def _assert_no_dead_nodes(node):
    for child in node:
        assert not child.is_dead()
        _assert_no_dead_nodes(child)


def test_no_dead_nodes_after_mixed_removals():
    words = ["a", "ab", "abc", "abd", "b", "bcd", "bce", "zebra"]
    lex = LexiconTrie(words)
    for w in ["abc", "a", "bcd", "zebra", "b"]:
        assert lex.remove_word(w)
        _assert_no_dead_nodes(lex.root)
    assert list(lex.words()) == ["ab", "abd", "bce"]


def test_empty_prefix_always_matches():
    assert LexiconTrie().contains_prefix("") is True


def test_prefix_monotonic(lexicon):
    assert lexicon.contains_prefix("cart")
    for i in range(len("cart")):
        assert lexicon.contains_prefix("cart"[:i])


def test_words_sorted_and_unique():
    words = ["pear", "apple", "peach", "app", "banana", "apple", "pea"]
    lex = LexiconTrie(words)
    listed = list(lex)
    assert listed == sorted(set(words))


def test_words_view_is_restartable(lexicon):
    view = lexicon.words()
    assert list(view) == list(view)
    assert len(view) == 3
    assert "cart" in view
    assert "ca" not in view


def test_words_with_prefix(lexicon):
    assert list(lexicon.words_with_prefix("car")) == ["car", "cart"]
    assert list(lexicon.words_with_prefix("")) == ["car", "cart", "cat"]
    assert list(lexicon.words_with_prefix("dog")) == []


def test_mutation_during_iteration_raises(lexicon):
    it = iter(lexicon.words())
    assert next(it) == "car"
    lexicon.add_word("zoo")
    with pytest.raises(RuntimeError):
        next(it)


def test_failed_mutation_does_not_break_iteration(lexicon):
    it = iter(lexicon.words())
    next(it)
    lexicon.add_word("car")
    lexicon.remove_word("dog")
    assert list(it) == ["cart", "cat"]


def test_clear(lexicon):
    lexicon.clear()
    assert len(lexicon) == 0
    assert not lexicon.contains_word("cat")
    assert lexicon.contains_prefix("")


def test_contains_rejects_non_strings(lexicon):
    assert 42 not in lexicon
    assert None not in lexicon

import pytest

from cpkit.strings import AhoCorasick, KMPSearcher, get_pi


def test_get_pi_classic_example():
    assert get_pi("abcabcd") == [0, 0, 0, 1, 2, 3, 0]


@pytest.mark.parametrize("s", ["aabaaab", "abababab", "zzzz", "abcd", "a"])
def test_get_pi_values_are_borders(s):
    pi = get_pi(s)
    assert len(pi) == len(s)
    for i, p in enumerate(pi):
        assert 0 <= p <= i
        assert s[:p] == s[i - p + 1:i + 1]


def test_get_pi_empty_raises():
    with pytest.raises(ValueError):
        get_pi("")


@pytest.mark.parametrize(
    "pattern,text",
    [("world", "hello world"), ("aab", "aaaab"), ("abab", "abaabababab"), ("x", "abc")],
)
def test_kmp_matches_str_find(pattern, text):
    result = KMPSearcher(pattern).search(text)
    pos = text.find(pattern)
    if pos == -1:
        assert result is None
    else:
        assert result == (pos, pos + len(pattern))


def test_kmp_works_on_lists():
    text = [3, 1, 4, 1, 5, 9, 2, 6]
    start, end = KMPSearcher([1, 5, 9]).search(text)
    assert text[start:end] == [1, 5, 9]


def test_kmp_empty_pattern_raises():
    with pytest.raises(ValueError):
        KMPSearcher("")


@pytest.fixture
def automaton():
    ac = AhoCorasick()
    for word in ["he", "she", "his", "hers"]:
        ac.insert(word)
    return ac


def test_aho_prefix_weights(automaton):
    assert automaton.weight[automaton.get("h")] == 3
    assert automaton.get("x") is None


def test_aho_insert_returns_get_node(automaton):
    node = automaton.insert("hers")
    assert node == automaton.get("hers")


def test_aho_failure_links(automaton):
    automaton.initialize()
    assert automaton.fail[automaton.get("she")] == automaton.get("he")
    assert automaton.fail[automaton.get("hers")] == automaton.get("s")
    assert all(v != -1 for row in automaton.go for v in row)


def test_aho_transitions_follow_trie(automaton):
    automaton.initialize()
    sh = automaton.get("sh")
    assert automaton.go[sh][ord("e") - ord("a")] == automaton.get("she")


def test_aho_rejects_out_of_alphabet():
    ac = AhoCorasick(alphabet_size=2, alpha="0")
    with pytest.raises(ValueError):
        ac.insert("012")
import random
from collections import Counter

from wordpredict.mapping import build_frequency_mapping, word_frequencies


def test_counts_adjacent_pairs_in_first_seen_order():
    m = build_frequency_mapping(["the", "cat", "sat", "the", "cat", "ran"])
    assert m["the"] == Counter({"cat": 2})
    assert list(m["cat"]) == ["sat", "ran"]
    assert m["sat"] == Counter({"the": 1})
    assert "ran" not in m  # last token never leads a pair


def test_short_sequences_give_empty_mapping():
    assert build_frequency_mapping([]) == {}
    assert build_frequency_mapping(["alone"]) == {}


def test_context_totals_match_positions():
    rng = random.Random(7)
    vocab = ["a", "b", "c", "d"]
    for _ in range(20):
        tokens = [rng.choice(vocab) for _ in range(rng.randint(2, 40))]
        m = build_frequency_mapping(tokens)
        for ctx, successors in m.items():
            expected = sum(1 for i, t in enumerate(tokens[:-1]) if t == ctx)
            assert sum(successors.values()) == expected
            assert successors  # never an empty inner mapping


def test_lookup_of_unknown_context_does_not_add_keys():
    m = build_frequency_mapping(["x", "y"])
    assert m.get("z") is None
    assert list(m) == ["x"]


def test_word_frequencies_count_both_sides():
    # cat->dog, dog->car, car->dog, dog->cart
    m = build_frequency_mapping(["cat", "dog", "car", "dog", "cart"])
    freq = word_frequencies(m)
    assert freq == {"cat": 1, "dog": 4, "car": 2, "cart": 1}


def test_word_frequencies_double_count_self_successor():
    m = build_frequency_mapping(["very", "very"])
    assert word_frequencies(m) == {"very": 2}

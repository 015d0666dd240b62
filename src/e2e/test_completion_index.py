from wordpredict.completion import build_completion_index


def test_single_word_has_one_entry_per_prefix():
    idx = build_completion_index({"cart"})
    assert sorted(idx) == ["c", "ca", "car", "cart"]
    assert all(words == ["cart"] for words in idx.values())


def test_lists_are_sorted_and_distinct():
    idx = build_completion_index(["cat", "cart", "car", "cat"])
    assert idx["ca"] == ["car", "cart", "cat"]
    assert idx["car"] == ["car", "cart"]
    assert idx["cat"] == ["cat"]


def test_input_order_does_not_matter():
    words = ["bee", "beam", "bean", "b", "zebra"]
    assert build_completion_index(words) == build_completion_index(reversed(words))


def test_empty_input():
    assert build_completion_index([]) == {}

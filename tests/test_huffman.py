import pytest

from daakit.huffman import (
    HuffmanNode,
    build_tree,
    build_tree_from_text,
    code_table,
    count_symbols,
    distinct_frequencies,
    encode,
    fixed_size_bits,
    huffman_codes,
)

MESSAGE = "abbcdbccdaabbeeebeab"
ALPHABET = "abcde"


def _decode(root, bits):
    out = []
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node.is_leaf():
            out.append(node.symbol)
            node = root
    return "".join(out)


def _is_prefix_free(codes):
    values = list(codes.values())
    return all(
        not b.startswith(a) for i, a in enumerate(values) for j, b in enumerate(values) if i != j
    )


def test_count_symbols_matches_message():
    counts = count_symbols(MESSAGE, ALPHABET)
    assert counts == [MESSAGE.count(c) for c in ALPHABET]
    assert sum(counts) == len(MESSAGE)


def test_source_message_codes_are_prefix_free():
    codes = huffman_codes(list(ALPHABET), count_symbols(MESSAGE, ALPHABET))
    assert set(codes) == set(ALPHABET)
    assert _is_prefix_free(codes)


def test_root_frequency_is_total():
    freqs = count_symbols(MESSAGE, ALPHABET)
    root = build_tree(list(ALPHABET), freqs)
    assert root.freq == sum(freqs)
    assert not root.is_leaf()


def test_higher_frequency_never_gets_longer_code():
    freqs = count_symbols(MESSAGE, ALPHABET)
    codes = huffman_codes(list(ALPHABET), freqs)
    by_symbol = dict(zip(ALPHABET, freqs))
    for a in ALPHABET:
        for b in ALPHABET:
            if by_symbol[a] > by_symbol[b]:
                assert len(codes[a]) <= len(codes[b])


def test_equal_frequencies_give_balanced_codes():
    codes = huffman_codes(["w", "x", "y", "z"], [1, 1, 1, 1])
    assert sorted(len(c) for c in codes.values()) == [2, 2, 2, 2]
    assert _is_prefix_free(codes)


def test_single_symbol_has_empty_code():
    assert huffman_codes(["x"], [5]) == {"x": ""}


def test_build_tree_rejects_bad_input():
    with pytest.raises(ValueError):
        build_tree([], [])
    with pytest.raises(ValueError):
        build_tree(["a", "b"], [1])


def test_build_tree_from_empty_text_raises():
    with pytest.raises(ValueError):
        build_tree_from_text("")


def test_leaf_and_internal_nodes():
    leaf = HuffmanNode(3, "a")
    parent = HuffmanNode(4, None, leaf, HuffmanNode(1, "b"))
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False


@pytest.mark.parametrize(
    "text",
    [MESSAGE, "hello world", "mississippi", "$a$b$c", "ab"],
)
def test_encode_round_trip(text):
    root = build_tree_from_text(text)
    codes = code_table(root)
    assert set(codes) == set(text)
    assert _is_prefix_free(codes)
    bits = encode(text, codes)
    assert set(bits) <= {"0", "1"}
    assert _decode(root, bits) == text


@pytest.mark.parametrize("text", [MESSAGE, "hello world", "mississippi", "abcdefgh"])
def test_variable_length_not_longer_than_fixed(text):
    codes = code_table(build_tree_from_text(text))
    assert len(encode(text, codes)) <= fixed_size_bits(text)
    assert fixed_size_bits(text) % len(text) == 0


def test_fixed_size_bits_beyond_32_symbols_is_zero():
    text = "".join(chr(ord("A") + i) for i in range(40))
    assert fixed_size_bits(text) == 0


def test_encode_unknown_symbol_raises():
    codes = code_table(build_tree_from_text("ab"))
    with pytest.raises(KeyError):
        encode("abc", codes)


def test_distinct_frequencies_sorted_and_stable():
    pairs = distinct_frequencies(MESSAGE)
    counts = [count for _, count in pairs]
    assert counts == sorted(counts)
    assert dict(pairs) == {c: MESSAGE.count(c) for c in set(MESSAGE)}
    for (a, fa), (b, fb) in zip(pairs, pairs[1:]):
        if fa == fb:
            assert MESSAGE.index(a) < MESSAGE.index(b)


def test_tree_from_distinct_frequencies_matches_text_total():
    pairs = distinct_frequencies("mississippi")
    root = build_tree([s for s, _ in pairs], [f for _, f in pairs])
    assert root.freq == len("mississippi")
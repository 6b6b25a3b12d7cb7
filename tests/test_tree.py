import pytest

from huffpack.tree import HuffmanNode, HuffmanTree

FREQUENCY_SAMPLE = b"abcdabcdabcdabcd"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "frequency_table_test.txt"
    path.write_bytes(FREQUENCY_SAMPLE)
    return path


def test_frequency_table(sample_file):
    tree = HuffmanTree()
    tree.count_file(sample_file)
    table = tree.chars_frequency
    assert table[ord("a")] == 4
    assert table[ord("b")] == 4
    assert table[ord("c")] == 4
    assert table[ord("d")] == 4
    assert tree.alphabet_power == 4
    assert tree.number_of_chars == 16

    tree.add_symbol(ord("q"), 100)
    assert tree.chars_frequency[ord("q")] == 100


def test_add_symbol_keeps_existing_frequency(sample_file):
    tree = HuffmanTree()
    tree.count_file(sample_file)
    tree.add_symbol(ord("a"), 100)
    assert tree.chars_frequency[ord("a")] == 4


def test_build_code_tree(sample_file):
    tree = HuffmanTree()
    tree.count_file(sample_file)
    tree.build()
    code_table = tree.build_table()

    for symbol in b"abcd":
        assert len(code_table[symbol]) == 2

    root = tree.root
    assert root.left is not None
    assert root.right is not None
    assert root.frequency == 16
    assert root.left.frequency == 8
    assert root.right.frequency == 8

    assert len({code_table[symbol] for symbol in b"abcd"}) == 4

    left_left = root.left.left
    assert left_left.is_leaf()
    assert left_left.symbol in b"abcd"
    assert left_left.frequency == 4


def test_one_symbol_text(tmp_path):
    path = tmp_path / "one_symbol_test.txt"
    path.write_bytes(b")" * 100)
    tree = HuffmanTree()
    tree.count_file(path)
    tree.build()
    code_table = tree.build_table()

    assert code_table[ord(")")] == "1"
    assert tree.alphabet_power == 1
    assert tree.chars_frequency[ord(")")] == 100

    root = tree.root
    assert root.symbol == ord(")")
    assert root.frequency == 100
    assert root.left is None
    assert root.right is None


def test_codes_are_prefix_free():
    tree = HuffmanTree()
    tree.count_bytes(b"the quick brown fox jumps over the lazy dog" * 3)
    tree.build()
    codes = list(tree.build_table().values())
    for code in codes:
        for other in codes:
            if code is not other:
                assert not other.startswith(code)


def test_count_bytes_accumulates_frequencies():
    tree = HuffmanTree()
    tree.count_bytes(b"aab")
    tree.count_bytes(b"ab")
    assert tree.chars_frequency == {ord("a"): 3, ord("b"): 2}
    assert tree.number_of_chars == 2


def test_symbols_ordered_as_signed_bytes():
    tree = HuffmanTree()
    tree.count_bytes(bytes([0x01, 0xFF, 0x80, 0x7F]))
    assert list(tree.chars_frequency) == [0x80, 0xFF, 0x01, 0x7F]


def test_build_without_symbols_raises():
    with pytest.raises(ValueError):
        HuffmanTree().build()


def test_node_is_leaf():
    leaf = HuffmanNode(3, ord("x"))
    parent = HuffmanNode(6, None, leaf, HuffmanNode(3, ord("y")))
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False
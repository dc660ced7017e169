from random import Random
from suffixlcp.suffix_array import (SORT_METHODS,
                                    counting_sort,
                                    get_sort_method,
                                    initial_ranks,
                                    rerank,
                                    suffix_array,
                                    suffix_array_and_ranks,
                                    suffix_key)
import numpy as np

def naive_suffix_array(seq):
    return sorted(range(len(seq)), key = lambda i: seq[i:])

def test_suffix_array():
    examples = [
        ('ABAC', [0, 2, 1, 3]),
        ('banana', [5, 3, 1, 0, 4, 2]),
        ('abaab', [2, 3, 0, 4, 1]),
        ('ABABBAB', [5, 0, 2, 6, 4, 1, 3]),
        ('mississippi', [10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2]),
        ('', []),
        ('x', [0])]

    for method in SORT_METHODS:
        for seq, sa in examples:
            assert suffix_array(seq, method) == sa

def test_final_ranks_invert_suffix_array():
    for method in SORT_METHODS:
        sa, rank = suffix_array_and_ranks('mississippi', method)
        assert [rank[pos] for pos in sa] == list(range(11))

def test_empty_ranks():
    assert suffix_array_and_ranks('') == ([], [])

def test_other_symbol_types():
    examples = [
        (b'banana', [5, 3, 1, 0, 4, 2]),
        (bytearray(b'\xff\x00\xff'), [1, 2, 0]),
        ([2, 1, 3, 1, 3, 1], [5, 3, 1, 0, 4, 2]),
        (np.array([2, 1, 3, 1, 3, 1]), [5, 3, 1, 0, 4, 2]),
        ([-1, -2, -1], [1, 2, 0]),
        ([10**20, 5], [1, 0]),
        (['P2', 'P2', 'P0', 'P2'], [2, 3, 1, 0]),
        ([(1, 2), (0, 5), (1, 2)], [1, 2, 0]),
        ('ébé', [1, 2, 0])]
    for method in SORT_METHODS:
        for seq, sa in examples:
            assert suffix_array(seq, method) == sa

def test_initial_ranks():
    assert initial_ranks('ab') == [97, 98]
    assert initial_ranks(b'\x00\xff') == [0, 255]
    assert initial_ranks(['b', 'a', 'b']) == [1, 0, 1]
    assert initial_ranks([7, -3, 7]) == [1, 0, 1]
    assert initial_ranks(np.array([4, 0, 4])) == [4, 0, 4]

def test_suffix_key():
    rank = [2, 1, 3, 1, 3, 0]
    assert suffix_key(rank, 2, 0) == (2, 3)
    assert suffix_key(rank, 2, 4) == (3, -1)
    assert suffix_key(rank, 1, 5) == (0, -1)

def test_rerank():
    rank = initial_ranks('banana')
    sa = [5, 1, 3, 0, 2, 4]
    assert rerank(rank, sa, 1) == [2, 1, 3, 1, 3, 0]

def test_counting_sort():
    assert counting_sort([0, 1, 2, 3], [2, 0, 2, 1], 3) == [1, 3, 0, 2]
    # Stable on ties.
    assert counting_sort([3, 2, 1, 0], [0, 0, 0, 0], 1) == [3, 2, 1, 0]

def test_get_sort_method():
    assert get_sort_method('compare') == SORT_METHODS['compare']
    try:
        get_sort_method('quick')
        assert False
    except ValueError as e:
        assert 'compare, numpy, and radix' in str(e)

def test_random_texts():
    rnd = Random(1234)
    for alphabet in ['ab', 'abc', 'acgt']:
        for _ in range(40):
            n = rnd.randrange(0, 60)
            seq = ''.join(rnd.choice(alphabet) for _ in range(n))
            expected = naive_suffix_array(seq)
            for method in SORT_METHODS:
                assert suffix_array(seq, method) == expected

def test_repeated_text():
    seq = 'abc' * 50 + 'a' * 40
    expected = naive_suffix_array(seq)
    for method in SORT_METHODS:
        assert suffix_array(seq, method) == expected

# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Verification of suffix and lcp arrays by brute force.
from suffixlcp.index import build
from suffixlcp.lcp import common_prefix_length
from suffixlcp.utils import SP

class InvalidSuffixArray(ValueError):
    pass

SELF_TEST_CASES = [
    ('banana', [5, 3, 1, 0, 4, 2], [0, 1, 3, 0, 0, 2]),
    ('ababa', [4, 2, 0, 3, 1], [0, 1, 3, 0, 2]),
    ('aaaaa', [4, 3, 2, 1, 0], [0, 1, 2, 3, 4]),
    ('abcde', [0, 1, 2, 3, 4], [0, 0, 0, 0, 0]),
    ('', [], []),
    ('a', [0], [0]),
    ('mississippi',
     [10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2],
     [0, 1, 1, 4, 0, 0, 1, 0, 2, 1, 3])
]

def check_permutation(sa, n):
    if len(sa) != n:
        fmt = 'Suffix array has %d entries, expected %d!'
        raise InvalidSuffixArray(fmt % (len(sa), n))
    seen = [False] * n
    for i, pos in enumerate(sa):
        if not 0 <= pos < n or seen[pos]:
            fmt = 'SA[%d] = %d is out of range or repeated!'
            raise InvalidSuffixArray(fmt % (i, pos))
        seen[pos] = True

def suffix_less(seq, i, j):
    '''True if the suffix starting at i sorts before the one at j.'''
    k = common_prefix_length(seq, i, j)
    n = len(seq)
    if j + k == n:
        return False
    if i + k == n:
        return True
    return seq[i + k] < seq[j + k]

def check_sorted(seq, sa):
    for i in range(1, len(sa)):
        if not suffix_less(seq, sa[i - 1], sa[i]):
            fmt = 'Suffixes at SA[%d] = %d and SA[%d] = %d are out of order!'
            raise InvalidSuffixArray(fmt % (i - 1, sa[i - 1], i, sa[i]))

def check_lcp(seq, sa, lcp):
    if len(lcp) != len(sa):
        fmt = 'LCP array has %d entries, expected %d!'
        raise InvalidSuffixArray(fmt % (len(lcp), len(sa)))
    if lcp and lcp[0] != 0:
        raise InvalidSuffixArray('LCP[0] = %d, expected 0!' % lcp[0])
    for i in range(1, len(sa)):
        k = common_prefix_length(seq, sa[i - 1], sa[i])
        if lcp[i] != k:
            fmt = 'LCP[%d] = %d, expected %d!'
            raise InvalidSuffixArray(fmt % (i, lcp[i], k))

def check_result(seq, sa, lcp):
    check_permutation(sa, len(seq))
    check_sorted(seq, sa)
    check_lcp(seq, sa, lcp)

def run_self_test(method):
    '''Builds the arrays for the known examples and compares them with
    the expected ones. Returns the number of examples passed.'''
    SP.header('SELF TEST', '%s', method)
    for text, exp_sa, exp_lcp in SELF_TEST_CASES:
        sa, lcp = build(text, method)
        if sa != exp_sa or lcp != exp_lcp:
            fmt = '%r gave SA %s and LCP %s, expected %s and %s!'
            args = (text, sa, lcp, exp_sa, exp_lcp)
            raise InvalidSuffixArray(fmt % args)
        check_result(text, sa, lcp)
        SP.print('%-14r passed.' % text)
    SP.leave()
    return len(SELF_TEST_CASES)

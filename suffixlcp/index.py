# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Builds the suffix array and the lcp array of a text.
from collections import namedtuple
from suffixlcp.lcp import kasai
from suffixlcp.suffix_array import (DEFAULT_METHOD,
                                    get_sort_method,
                                    suffix_array_and_ranks)
from suffixlcp.utils import SP, timed_call

SuffixArrayResult = namedtuple('SuffixArrayResult', ['sa', 'lcp'])

def build(seq, method = DEFAULT_METHOD):
    '''Returns the suffix array and the lcp array of seq. The rank table
    from the sorting phase is reused as the inverse suffix array by the
    lcp phase.'''
    get_sort_method(method)
    SP.header('SUFFIX ARRAY', '%d symbols using %s', (len(seq), method))
    sa, rank = timed_call('SORTING SUFFIXES',
                          suffix_array_and_ranks, seq, method)
    assert all(rank[pos] == i for i, pos in enumerate(sa))
    lcp = timed_call('COMPUTING LCP', kasai, seq, sa, rank)
    SP.leave()
    return SuffixArrayResult(sa, lcp)

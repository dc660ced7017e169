# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array construction by prefix doubling. Each pass sorts the
# suffixes on their first 2 * gap symbols using the ranks from the
# previous pass, so about log2(n) passes are needed.
#
# Three pass sorters are available:
#
#   compare  general comparison sort, O(n log n) per pass and
#            O(n log^2 n) in total
#   radix    two stable counting sorts, O(n) per pass and O(n log n)
#            in total
#   numpy    numpy.lexsort on the rank pairs
#
# They all produce the same suffix array since the order of the
# suffixes of a string is unique.
from suffixlcp.utils import SP
import numpy as np

# Rank of the missing symbol after the end of the text. Must be less
# than every real rank.
END_RANK = -1

# Integer symbols outside this range are ranked by vocabulary instead.
MAX_ORDINAL = 2**62

def dense_ranks(seq):
    vocab = sorted(set(seq))
    sym2idx = {sym : i for i, sym in enumerate(vocab)}
    return [sym2idx[sym] for sym in seq]

def initial_ranks(seq):
    '''Returns the ordinal value of each symbol in seq. Characters are
    ranked by their code points and bytes and non-negative integers by
    their values. Other symbols are ranked by their position in the
    sorted vocabulary, which gives the same order.'''
    if isinstance(seq, str):
        return [ord(ch) for ch in seq]
    if isinstance(seq, np.ndarray):
        seq = seq.tolist()
    seq = list(seq)
    if all(type(sym) == int for sym in seq) \
       and all(0 <= sym < MAX_ORDINAL for sym in seq):
        return seq
    return dense_ranks(seq)

def suffix_key(rank, gap, i):
    '''Sort key of the suffix starting at i when comparing prefixes of
    length 2 * gap.'''
    j = i + gap
    return rank[i], rank[j] if j < len(rank) else END_RANK

def sort_by_comparison(sa, rank, gap):
    return sorted(sa, key = lambda i: suffix_key(rank, gap, i))

def counting_sort(sa, keys, n_buckets):
    '''Stable sort of the positions in sa on keys[i].'''
    starts = [0] * n_buckets
    for i in sa:
        starts[keys[i]] += 1
    at = 0
    for k, count in enumerate(starts):
        starts[k] = at
        at += count
    out = [0] * len(sa)
    for i in sa:
        k = keys[i]
        out[starts[k]] = i
        starts[k] += 1
    return out

def sort_by_counting(sa, rank, gap):
    n = len(rank)
    # Only the first pass can have ranks that are ordinal values.
    if max(rank) >= n:
        rank = dense_ranks(rank)
    n_buckets = max(rank) + 2
    # Shift by one so that END_RANK gets bucket 0.
    next_keys = [rank[i + gap] + 1 if i + gap < n else END_RANK + 1
                 for i in range(n)]
    sa = counting_sort(sa, next_keys, n_buckets)
    return counting_sort(sa, rank, n_buckets)

def sort_by_lexsort(sa, rank, gap):
    rank = np.array(rank, dtype = np.int64)
    next_rank = np.full(len(rank), END_RANK, dtype = np.int64)
    if gap < len(rank):
        next_rank[:-gap] = rank[gap:]
    return np.lexsort((next_rank, rank)).tolist()

SORT_METHODS = {
    'compare' : sort_by_comparison,
    'radix' : sort_by_counting,
    'numpy' : sort_by_lexsort
}

DEFAULT_METHOD = 'compare'

def get_sort_method(name):
    sort_pass = SORT_METHODS.get(name)
    if sort_pass:
        return sort_pass
    names = sorted(SORT_METHODS)
    name_str = ', '.join(names[:-1]) + ', and ' + names[-1]
    fmt = '%s is not a sort method. Specify one of %s'
    raise ValueError(fmt % (name, name_str))

def rerank(rank, sa, gap):
    '''Assigns new ranks to the positions in the sorted suffix array
    sa. Suffixes whose keys tie get the same rank.'''
    new_rank = [0] * len(rank)
    prev_key = suffix_key(rank, gap, sa[0])
    at = 0
    for i in sa[1:]:
        key = suffix_key(rank, gap, i)
        if key != prev_key:
            at += 1
        new_rank[i] = at
        prev_key = key
    return new_rank

def suffix_array_and_ranks(seq, method = DEFAULT_METHOD):
    '''Returns the suffix array of seq and its final rank table, which
    is the inverse of the suffix array.'''
    sort_pass = get_sort_method(method)
    n = len(seq)
    if n == 0:
        return [], []
    sa = list(range(n))
    rank = initial_ranks(seq)
    gap = 1
    n_passes = 0
    while True:
        sa = sort_pass(sa, rank, gap)
        rank = rerank(rank, sa, gap)
        n_passes += 1
        if rank[sa[-1]] == n - 1:
            break
        gap *= 2
    SP.print('%d passes, final prefix length %d.' % (n_passes, 2 * gap))
    return sa, rank

def suffix_array(seq, method = DEFAULT_METHOD):
    sa, _ = suffix_array_and_ranks(seq, method)
    return sa

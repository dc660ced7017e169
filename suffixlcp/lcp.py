# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# LCP arrays using Kasai's algorithm.
def inverse_permutation(sa):
    rank = [0] * len(sa)
    for i, pos in enumerate(sa):
        rank[pos] = i
    return rank

def kasai(seq, sa, rank):
    '''Computes the lcp array from the suffix array and its inverse in
    linear time. Positions are visited in text order and the match
    length h drops by at most one between consecutive positions, so it
    never has to be reset.'''
    n = len(sa)
    lcp = [0] * n
    h = 0
    for i, rank_el in enumerate(rank):
        if rank_el == 0:
            continue
        prev = sa[rank_el - 1]
        while i + h < n and prev + h < n and seq[i + h] == seq[prev + h]:
            h += 1
        lcp[rank_el] = h
        if h > 0:
            h -= 1
    return lcp

def lcp_array(seq, sa, rank = None):
    if rank is None:
        rank = inverse_permutation(sa)
    return kasai(seq, sa, rank)

def common_prefix_length(seq, i, j):
    '''Length of the common prefix of the suffixes starting at i and j,
    found by comparing symbol by symbol.'''
    n = len(seq)
    k = 0
    while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
        k += 1
    return k

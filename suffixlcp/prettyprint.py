# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Prettyprint suffix and lcp arrays.
from suffixlcp.utils import print_term_table

def symbols_to_string(symbols):
    if isinstance(symbols, str):
        return symbols
    if isinstance(symbols, (bytes, bytearray)):
        return symbols.decode('latin-1')
    return ' '.join(map(str, symbols))

def suffix_to_string(seq, i, width = None):
    suffix = seq[i:]
    if width is not None and len(suffix) > width:
        return symbols_to_string(suffix[:width]) + '...'
    return symbols_to_string(suffix)

def result_rows(seq, sa, lcp, width = None):
    return [(i, pos, lcp_el, suffix_to_string(seq, pos, width))
            for i, (pos, lcp_el) in enumerate(zip(sa, lcp))]

def result_to_string(seq, sa, lcp, width = None):
    return '\n'.join('SA[%d]=%d, LCP[%d]=%d: %s' % (i, pos, i, lcp_el, s)
                     for (i, pos, lcp_el, s)
                     in result_rows(seq, sa, lcp, width))

def print_result_table(seq, sa, lcp, width = None):
    rows = result_rows(seq, sa, lcp, width)
    print_term_table(['%d', '%d', '%d', '%s'], rows,
                     ['i', 'SA', 'LCP', 'Suffix'], 'rrrl')

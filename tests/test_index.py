# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from suffixlcp.check import SELF_TEST_CASES
from suffixlcp.index import SuffixArrayResult, build
from suffixlcp.suffix_array import SORT_METHODS
from suffixlcp.utils import SP

def test_build():
    for method in SORT_METHODS:
        for text, sa, lcp in SELF_TEST_CASES:
            res = build(text, method)
            assert res == (sa, lcp)
            assert res.sa == sa
            assert res.lcp == lcp

def test_build_empty():
    sa, lcp = build('')
    assert sa == []
    assert lcp == []

def test_build_is_deterministic():
    text = 'abracadabra' * 7
    first = build(text)
    for method in SORT_METHODS:
        assert build(text, method) == first

def test_build_does_not_modify_text():
    text = list(b'mississippi')
    build(text, 'radix')
    assert text == list(b'mississippi')

def test_build_bad_method():
    try:
        build('banana', 'bogo')
        assert False
    except ValueError as e:
        assert 'bogo is not a sort method' in str(e)
    assert SP.indent == 0

def test_build_verbose(capsys):
    SP.enabled = True
    try:
        res = build('banana')
    finally:
        SP.enabled = False
    assert isinstance(res, SuffixArrayResult)
    out = capsys.readouterr().out
    assert '* SUFFIX ARRAY 6 symbols using compare' in out
    assert '  * SORTING SUFFIXES' in out
    assert '2 passes, final prefix length 4.' in out
    assert SP.indent == 0

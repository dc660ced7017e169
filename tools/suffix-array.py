# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
'''
Suffix array tool
=================
Builds and prints the suffix array and the lcp array of a text.

Usage:
    suffix-array.py [-hv] build (<text> | --file=<path>)
        [--method=<s> --tokens --width=<i> --max-length=<i> --check]
    suffix-array.py [-hv] self-test [--method=<s>]

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --file=<path>          read the text from a file
    --method=<s>           pass sorter; compare, numpy or radix. The
                           self-test runs all of them if not given
    --tokens               split the text on whitespace and use the
                           tokens as symbols
    --width=<i>            truncate printed suffixes to this many
                           symbols [default: 40]
    --max-length=<i>       reject texts longer than this
                           [default: 1000000]
    --check                verify the arrays by brute force
'''
from docopt import docopt
from suffixlcp.check import check_result, run_self_test
from suffixlcp.index import build
from suffixlcp.prettyprint import print_result_table
from suffixlcp.suffix_array import DEFAULT_METHOD, SORT_METHODS
from suffixlcp.utils import SP, load_text, timed_call
from sys import exit

def build_and_print(text, method, width, check):
    sa, lcp = build(text, method)
    if not sa:
        print('Empty text.')
    else:
        print_result_table(text, sa, lcp, width)
    if check:
        timed_call('CHECKING', check_result, text, sa, lcp)
        print('%d suffixes verified.' % len(sa))

def main():
    args = docopt(__doc__, version = 'Suffix array tool 1.0')
    SP.enabled = args['--verbose']
    method = args['--method']

    try:
        if args['self-test']:
            methods = [method] if method else sorted(SORT_METHODS)
            for method in methods:
                n_passed = run_self_test(method)
                print('%s: %d examples passed.' % (method, n_passed))
        elif args['build']:
            if args['--file']:
                text = load_text(args['--file'], args['--tokens'])
            elif args['--tokens']:
                text = args['<text>'].split()
            else:
                text = args['<text>']
            max_length = int(args['--max-length'])
            if len(text) > max_length:
                fmt = 'Text has %d symbols, the limit is %d!'
                print(fmt % (len(text), max_length))
                exit(1)
            width = int(args['--width'])
            build_and_print(text, method or DEFAULT_METHOD, width,
                            args['--check'])
    except ValueError as e:
        print(e)
        exit(1)

if __name__ == '__main__':
    main()

# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Printing and loading utils.
from termtables import to_string
from time import time

class StructuredPrinter:
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            self.print_indented('* %s %s' % (name, fmt % args))
        else:
            self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        if args is not None:
            s = fmt % args
        else:
            s = str(fmt)
        self.print_indented(s)

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

SP = StructuredPrinter(False)

def timed_call(name, fun, *args):
    '''Calls fun with args and reports the elapsed time under a header
    called name.'''
    start = time()
    SP.header(name)
    ret = fun(*args)
    SP.print('Done in %.4f seconds.' % (time() - start))
    SP.leave()
    return ret

def load_text(path, tokens):
    '''Loads the text to index from path. With tokens the text is split
    on whitespace and each token becomes one symbol.'''
    with open(path, 'rb') as f:
        data = f.read()
    if tokens:
        return data.decode('utf-8').split()
    return data

def print_term_table(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    s = to_string(rows,
                  header = header,
                  padding = (0, 0, 0, 0),
                  alignment = alignment,
                  style = "            -- ")
    m = len(s.splitlines()[1]) - 2
    print(' ' + '=' * m)
    print(s)
    print(' ' + '=' * m)

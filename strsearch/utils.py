# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Output helpers: the nested progress printer used for logging and the
# table printer used by the command line tool.
from termtables import print as tt_print
from termtables.styles import markdown

INDENT_STEP = 2

class StructuredPrinter:
    '''Prints progress lines nested under section headers. Formatting
    is skipped entirely while the printer is disabled.'''
    def __init__(self, enabled):
        self.enabled = enabled
        self.depth = 0

    def emit(self, fmt, args):
        if not self.enabled:
            return
        line = fmt % args if args is not None else str(fmt)
        print(' ' * (INDENT_STEP * self.depth) + line)

    def header(self, name, fmt = None, args = None):
        if self.enabled:
            title = name if fmt is None else '%s %s' % (name, fmt % args)
            self.emit('* %s', (title,))
        self.depth += 1

    def print(self, fmt, args = None):
        self.emit(fmt, args)

    def leave(self):
        assert self.depth > 0, 'leave() without header()'
        self.depth -= 1

SP = StructuredPrinter(False)

def dedup(seq):
    '''Drops repeated items from seq, keeping the first occurrence of
    each.'''
    seen = set()
    for el in seq:
        if el not in seen:
            seen.add(el)
            yield el

def print_table(rows, header, alignment):
    rows = [[str(col) for col in row] for row in rows]
    tt_print(rows,
             padding = (0, 1),
             alignment = alignment,
             style = markdown,
             header = header)

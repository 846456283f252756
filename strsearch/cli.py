# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
'''
Suffix array tool
=================
Builds suffix and lcp arrays and runs string queries on them.

Usage:
    strsearch [options] sa <text>
    strsearch [options] search <text> <pattern>
    strsearch [options] repeated <text>
    strsearch [options] common [--k=<i>] <texts>...
    strsearch [options] unique <text>

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --k=<i>                number of texts a common substring must
                           occur in [default: 2]
'''
from docopt import docopt
from strsearch.search import (count_unique_substrings, find_all,
                              longest_common_substrings,
                              longest_repeated_substrings)
from strsearch.suffix_array import SuffixArray
from strsearch.utils import SP, print_table
from sys import exit

def print_suffix_table(text):
    SA = SuffixArray(text)
    sa = SA.get_suffix_array()
    lcp = SA.get_lcp_array()
    rows = [(i, pos, l, text[pos:])
            for i, (pos, l) in enumerate(zip(sa, lcp))]
    print_table(rows, ['#', 'Start', 'LCP', 'Suffix'], 'rrrl')

def run(args):
    if args['sa']:
        print_suffix_table(args['<text>'])
    elif args['search']:
        for i in find_all(args['<text>'], args['<pattern>']):
            print(i)
    elif args['repeated']:
        for s in longest_repeated_substrings(args['<text>']):
            print(s)
    elif args['common']:
        k = int(args['--k'])
        for s in longest_common_substrings(args['<texts>'], k):
            print(s)
    elif args['unique']:
        print(count_unique_substrings(args['<text>']))

def main(argv = None):
    args = docopt(__doc__, argv = argv, version = 'strsearch 1.0')
    SP.enabled = args['--verbose']
    try:
        run(args)
    # Bad input surfaces as InvalidInput or InvalidArgument, both
    # ValueErrors.
    except ValueError as e:
        print('Error: %s' % e)
        return 1
    return 0

if __name__ == '__main__':
    exit(main())

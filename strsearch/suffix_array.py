# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array by prefix doubling with counting sort, O(n log n), and
# the lcp array by Kasai's algorithm, O(n).
from strsearch.coding import encode_text
from strsearch.utils import SP
import numpy as np

def counting_sort(keys, order, n_buckets):
    '''Stable sort of the positions in order by keys[pos]. All keys
    must be in [0, n_buckets).'''
    ends = np.cumsum(np.bincount(keys[order], minlength = n_buckets))
    ends = ends.tolist()
    keys = keys.tolist()
    order = order.tolist()
    out = [0] * len(order)
    for pos in reversed(order):
        key = keys[pos]
        ends[key] -= 1
        out[ends[key]] = pos
    return np.array(out, dtype = np.int64)

def rerank(rank, sa, p):
    '''New ranks for the pairs (rank[i], rank[i + p]), with -1 past the
    end of the text. Equal pairs keep equal ranks.'''
    n = len(rank)
    rank_p = np.full(n, -1, dtype = np.int64)
    rank_p[:n - p] = rank[p:]
    diffs = np.logical_or(np.diff(rank[sa]), np.diff(rank_p[sa]))
    new_rank = np.empty(n, dtype = np.int64)
    new_rank[sa[0]] = 0
    new_rank[sa[1:]] = np.cumsum(diffs)
    return new_rank

def suffix_array(seq, alphabet_size = None):
    text = encode_text(seq)
    n = len(text)
    rank = np.array(text, dtype = np.int64)
    if alphabet_size is None:
        alphabet_size = int(rank.max()) + 1
    assert rank.max() < alphabet_size

    sa = counting_sort(rank, np.arange(n), alphabet_size)
    p = 1
    while p < n:
        # Suffixes of length p or less have nothing at offset p so
        # they go first, then the rest by their rank at offset p.
        order = np.concatenate((np.arange(n - p, n), sa[sa >= p] - p))
        sa = counting_sort(rank, order, alphabet_size)
        rank = rerank(rank, sa, p)
        max_rank = int(rank[sa[-1]])
        SP.print('p = %d, %d distinct ranks.', (p, max_rank + 1))
        if max_rank == n - 1:
            break
        alphabet_size = max_rank + 1
        p *= 2
    return sa.tolist()

def inverse_suffix_array(sa):
    inv = [0] * len(sa)
    for i, pos in enumerate(sa):
        inv[pos] = i
    return inv

def lcp_array(seq, sa):
    '''Returns both the rank array and the lcp array.'''
    n = len(sa)
    lcp = [0] * n
    rank = inverse_suffix_array(sa)
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == 0:
            k = 0
            continue
        j = sa[rank_el - 1]
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el] = k
        # The next suffix shares at least k - 1 symbols with its
        # predecessor.
        if k > 0:
            k -= 1
    return rank, lcp

class SuffixArray:
    def __init__(self, text):
        self.text = tuple(encode_text(text))
        sa = suffix_array(self.text)
        rank, lcp = lcp_array(self.text, sa)
        self._sa = tuple(sa)
        self._rank = tuple(rank)
        self._lcp = tuple(lcp)

    def __len__(self):
        return len(self.text)

    def get_suffix_array(self):
        return list(self._sa)

    def get_lcp_array(self):
        return list(self._lcp)

    def get_inverse(self):
        return list(self._rank)

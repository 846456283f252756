# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Sliding windows over the generalized suffix array for finding
# substrings shared by k texts.
from collections import deque

class SlidingWindow:
    '''Minimum (or maximum) of values[lo:hi] in amortized O(1) per
    step, using a monotonic deque of indices.'''
    def __init__(self, values, minimum = True, start = 0):
        self.values = values
        self.minimum = minimum
        self.lo = start
        self.hi = start
        self.deque = deque()

    def __len__(self):
        return self.hi - self.lo

    def worse(self, a, b):
        return a > b if self.minimum else a < b

    def advance(self):
        if self.hi >= len(self.values):
            return
        el = self.values[self.hi]
        while self.deque and self.worse(self.values[self.deque[-1]], el):
            self.deque.pop()
        self.deque.append(self.hi)
        self.hi += 1

    def shrink(self):
        if self.lo >= self.hi:
            return
        self.lo += 1
        while self.deque and self.deque[0] < self.lo:
            self.deque.popleft()

    @property
    def value(self):
        if self.lo < self.hi:
            return self.values[self.deque[0]]
        return None

def common_substring_starts(gsa, k):
    '''Slides a window [lo, hi) over the rows of the suffix array,
    tracking the set of colors in it. Rows are colored with
    gsa.get_color(row) and the window length is the minimum of
    lcp[lo:hi]. Returns the longest length seen while the set holds k
    colors and the suffix starts that reached it.'''
    sa = gsa.get_suffix_array()
    lcp = gsa.get_lcp_array()
    n = len(sa)

    # The first n_texts rows are the sentinel suffixes.
    first = gsa.n_texts
    if first >= n:
        return 0, []
    window = SlidingWindow(lcp, True, first + 1)
    colors = {gsa.get_color(first)}
    lo = hi = first + 1
    best_len, starts = 0, []
    while lo < n - 1:
        if hi == n - 1 or len(colors) == k:
            colors.discard(gsa.get_color(lo))
            lo += 1
            window.shrink()
        else:
            colors.add(gsa.get_color(hi))
            hi += 1
            window.advance()
        if len(colors) == k:
            length = window.value
            if length is None or length == 0 or length < best_len:
                continue
            if length > best_len:
                best_len = length
                starts = []
            starts.append(sa[lo])
    return best_len, starts

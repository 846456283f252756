# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# String searching on top of suffix and lcp arrays.
from strsearch.coding import (InvalidArgument, InvalidInput,
                              encode_text, encode_texts)
from strsearch.generalized import GeneralizedSuffixArray
from strsearch.suffix_array import SuffixArray, lcp_array, suffix_array
from strsearch.utils import SP, dedup
from strsearch.window import common_substring_starts

def encode_text_and_pattern(text, pattern):
    if text is None or len(text) == 0:
        raise InvalidInput('Text input is required')
    if pattern is None:
        raise InvalidInput('Pattern is required')
    return encode_texts([text, pattern])

def substring(text, i, j):
    if isinstance(text, str):
        return text[i:j]
    return tuple(text[i:j])

def lower_bound(codes, sa, pattern):
    lo, hi = 0, len(sa)
    m = len(pattern)
    while lo < hi:
        mid = (lo + hi) // 2
        i = sa[mid]
        if codes[i:i + m] < pattern:
            lo = mid + 1
        else:
            hi = mid
    return lo

def upper_bound(codes, sa, pattern):
    lo, hi = 0, len(sa)
    m = len(pattern)
    while lo < hi:
        mid = (lo + hi) // 2
        i = sa[mid]
        if pattern < codes[i:i + m]:
            hi = mid
        else:
            lo = mid + 1
    return lo

def search_pattern(text, pattern):
    '''Start index of some occurrence of pattern in text, or -1. Only
    worth it for short texts since the suffix array is built for every
    call.'''
    codes, pattern = encode_text_and_pattern(text, pattern)
    n, m = len(codes), len(pattern)
    if m == 0 or m > n:
        return -1
    sa = suffix_array(codes)
    lo, hi = 0, n - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        i = sa[mid]
        prefix = codes[i:i + m]
        if prefix == pattern:
            return i
        if prefix < pattern:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1

def find_all(text, pattern):
    '''Sorted start indices of all, possibly overlapping, occurrences
    of pattern in text.'''
    codes, pattern = encode_text_and_pattern(text, pattern)
    if len(pattern) == 0 or len(pattern) > len(codes):
        return []
    sa = suffix_array(codes)
    lo = lower_bound(codes, sa, pattern)
    hi = upper_bound(codes, sa, pattern)
    return sorted(sa[lo:hi])

def longest_repeated_substrings(text):
    '''All longest substrings occurring at least twice. Empty if no
    symbol repeats.'''
    SA = SuffixArray(text)
    sa = SA.get_suffix_array()
    lcp = SA.get_lcp_array()
    best_len = max(lcp)
    if best_len == 0:
        return []
    return list(dedup(substring(text, sa[i], sa[i] + best_len)
                      for i, l in enumerate(lcp) if l == best_len))

def longest_common_substrings(texts, k):
    '''Longest substrings shared by k of the texts, as found by the
    color window scan in strsearch.window.'''
    if not isinstance(texts, (list, tuple)) or len(texts) < 2:
        raise InvalidArgument('At least two texts are required')
    if not isinstance(k, int) or isinstance(k, bool) \
       or not 2 <= k <= len(texts):
        raise InvalidArgument('Invalid k value, k >= 2 && k <= %d'
                              % len(texts))
    gsa = GeneralizedSuffixArray(texts)
    best_len, starts = common_substring_starts(gsa, k)
    SP.print('Longest common length %d, %d windows.',
             (best_len, len(starts)))
    return list(dedup(gsa.substring(i, best_len) for i in starts))

def count_unique_substrings(text):
    codes = encode_text(text)
    n = len(codes)
    _, lcp = lcp_array(codes, suffix_array(codes))
    return n * (n + 1) // 2 - sum(lcp)

def unique_substrings(text):
    '''Every distinct substring of text once, in lexicographic order.
    Each suffix contributes the prefixes longer than what it shares
    with the previous suffix.'''
    SA = SuffixArray(text)
    sa = SA.get_suffix_array()
    lcp = SA.get_lcp_array()
    n = len(SA)
    return [substring(text, i, j)
            for i, l in zip(sa, lcp)
            for j in range(i + l + 1, n + 1)]

# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from random import Random
from strsearch.coding import InvalidArgument, InvalidInput
from strsearch.search import (count_unique_substrings,
                              find_all,
                              longest_common_substrings,
                              longest_repeated_substrings,
                              search_pattern,
                              unique_substrings)

import pytest

PATTERN_EXAMPLES = [
    ('abababa', '', []),
    ('abababa', 'aba', [0, 2, 4]),
    ('abc', 'abcdef', []),
    ('P@TTerNabcdefP@TTerNP@TTerNabcdefabcdefabcdefabcdefP@TTerN',
     'P@TTerN', [0, 13, 20, 51]),
    ('ababababa', 'a', [0, 2, 4, 6, 8]),
    ('123456', '123456', [0]),
    ('ABABAAABAABAB', 'AA', [4, 5, 8]),
    ('SAAT TE', 'TE', [5]),
    ('Sample text for testing the Boyer-Moore algorithm.', 'te', [7, 16]),
    ('Sample text for testing the Boyer-Moore algorithm.', ' ',
     [6, 11, 15, 23, 27, 39]),
    ('AAAAAAA', 'AA', [0, 1, 2, 3, 4, 5]),
    ('banana', 'x', []),
    ('banana', 'nab', [])
    ]

def test_search_pattern():
    for text, pattern, occurrences in PATTERN_EXAMPLES:
        idx = search_pattern(text, pattern)
        if occurrences:
            assert idx in occurrences
        else:
            assert idx == -1

def test_find_all():
    for text, pattern, occurrences in PATTERN_EXAMPLES:
        assert find_all(text, pattern) == occurrences

def test_search_coded():
    text = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
    assert find_all(text, [5]) == [4, 8, 10]
    assert search_pattern(text, [1, 5, 9]) == 3
    assert find_all(text, [7]) == []

def test_search_invalid():
    for text in [None, '']:
        with pytest.raises(InvalidInput):
            search_pattern(text, 'a')
        with pytest.raises(InvalidInput):
            find_all(text, 'a')
    with pytest.raises(InvalidInput):
        search_pattern('abc', None)

def test_longest_repeated():
    examples = [
        ('ABC$BCA$CAB', ['AB', 'BC', 'CA']),
        ('abcde', []),
        ('aaaaa', ['aaaa']),
        ('banana', ['ana']),
        ('abcabcabc', ['abcabc'])
        ]
    for text, substrings in examples:
        assert longest_repeated_substrings(text) == substrings

def test_longest_repeated_coded():
    assert longest_repeated_substrings([1, 2, 1, 2, 3]) == [(1, 2)]

def test_longest_common():
    examples = [
        (['abcde', 'habcab', 'ghabcdf'], 2, ['ab']),
        (['AABC', 'BCDC', 'BCDE', 'CDED'], 2, ['BCD', 'CDE']),
        (['AABC', 'BCDC', 'BCDE', 'CDED'], 3, []),
        (['abc', 'xyz'], 2, []),
        (['abc', ''], 2, [])
        ]
    for texts, k, substrings in examples:
        assert longest_common_substrings(texts, k) == substrings

def test_longest_common_invalid():
    with pytest.raises(InvalidArgument):
        longest_common_substrings(None, 2)
    with pytest.raises(InvalidArgument):
        longest_common_substrings(3, 2)
    with pytest.raises(InvalidArgument):
        longest_common_substrings(['sv'], 2)
    for k in [None, 1, 5, 2.0]:
        with pytest.raises(InvalidArgument):
            longest_common_substrings(['sv', 'vs'], k)

def test_unique_substrings():
    examples = [
        ('AZAZA', ['A', 'AZ', 'AZA', 'AZAZ', 'AZAZA',
                   'Z', 'ZA', 'ZAZ', 'ZAZA']),
        ('abcd', ['a', 'ab', 'abc', 'abcd', 'b', 'bc', 'bcd',
                  'c', 'cd', 'd']),
        ('aaaa', ['a', 'aa', 'aaa', 'aaaa'])
        ]
    for text, substrings in examples:
        assert unique_substrings(text) == substrings
        assert count_unique_substrings(text) == len(substrings)

def test_count_unique_against_naive():
    rnd = Random(7)
    for _ in range(50):
        n = rnd.randint(1, 30)
        text = ''.join(rnd.choice('xy') for _ in range(n))
        subs = {text[i:j] for i in range(n) for j in range(i + 1, n + 1)}
        assert count_unique_substrings(text) == len(subs)
        assert unique_substrings(text) == sorted(subs)

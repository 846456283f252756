# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from strsearch.coding import (InvalidInput,
                              SymbolEncoder,
                              encode_text,
                              encode_texts)

import pytest

def test_format():
    seq = encode_text('blah')
    assert seq == [98, 108, 97, 104]
    assert type(seq) == list

def test_codes_pass_through():
    assert encode_text([0, 7, 3]) == [0, 7, 3]
    assert encode_texts([[1, 2], []]) == [[1, 2], []]

def test_sparse_codes_renumbered():
    assert encode_text([10**12, 0, 10**12]) == [1, 0, 1]
    assert encode_text([2**64, 5, 2**64 + 1]) == [1, 0, 2]
    assert encode_texts([[10**9, 3], [3, 70]]) == [[2, 0], [0, 1]]
    # Codes within the direct range are left alone.
    assert encode_text([0x10ffff, 0]) == [0x10ffff, 0]

def test_shared_vocab():
    seqs = encode_texts([[('P', 2), ('S', 4)], [('P', 0), ('P', 2)]])
    assert seqs == [[1, 2], [0, 1]]
    assert encode_texts([[-5, 3], [0]]) == [[0, 2], [1]]

def test_encoder():
    enc = SymbolEncoder(['b', 'a', 'b'])
    assert enc.encode('abba') == [0, 1, 1, 0]
    assert enc.decode([1, 0]) == ['b', 'a']

def test_missing_item():
    enc = SymbolEncoder('ab')
    with pytest.raises(KeyError):
        enc.encode('c')

def test_invalid():
    for text in [None, '', [], ()]:
        with pytest.raises(InvalidInput):
            encode_text(text)
    with pytest.raises(InvalidInput):
        encode_texts(['ab', None])
    with pytest.raises(InvalidInput):
        encode_texts([[1, 'a'], [-1]])

# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Turns input texts into sequences of non-negative integer codes. The
# suffix sorting code only ever sees the codes.
from itertools import chain
import numpy as np

# Integer codes below this are sorted as they are.
MAX_DIRECT_CODE = 0x110000

class InvalidInput(ValueError):
    '''Missing or empty text, or missing pattern.'''

class InvalidArgument(ValueError):
    '''Argument outside its allowed range, like too few texts or a bad
    k.'''

def is_code(sym):
    return isinstance(sym, (int, np.integer)) \
        and not isinstance(sym, bool) and sym >= 0

class SymbolEncoder:
    '''Maps arbitrary orderable symbols to dense codes. Codes are
    assigned in sorted symbol order so comparing codes is the same as
    comparing symbols.'''
    def __init__(self, symbols):
        self.vocab = sorted(set(symbols))
        self.sym2ix = {sym : i for i, sym in enumerate(self.vocab)}

    def encode(self, seq):
        return [self.sym2ix[sym] for sym in seq]

    def decode(self, codes):
        return [self.vocab[ix] for ix in codes]

def encode_texts(texts):
    '''Codes several texts with one shared mapping. Empty texts are
    allowed here.'''
    for text in texts:
        if text is None:
            raise InvalidInput('Text input is required')
    if all(isinstance(text, str) for text in texts):
        return [[ord(ch) for ch in text] for text in texts]
    seqs = [list(text) for text in texts]
    if all(is_code(sym) for sym in chain(*seqs)):
        codes = [[int(sym) for sym in seq] for seq in seqs]
        top = max(chain(*codes), default = 0)
        # Counting sort needs top + 1 buckets, so sparse codes are
        # renumbered.
        if top < max(MAX_DIRECT_CODE, 2 * sum(map(len, codes))):
            return codes
    try:
        enc = SymbolEncoder(chain(*seqs))
    except TypeError as e:
        raise InvalidInput('Symbols must be hashable and orderable: %s' % e)
    return [enc.encode(seq) for seq in seqs]

def encode_text(text):
    if text is None or len(text) == 0:
        raise InvalidInput('Text input is required')
    return encode_texts([text])[0]

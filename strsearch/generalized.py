# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Generalized suffix array over several texts. The texts are joined as
# t_0 $_0 t_1 $_1 ... t_k-1 $_k-1 where the sentinels $_i are coded
# 0..k-1 and every real symbol is shifted up past them. Each position
# is colored with the index of the text it came from.
from strsearch.coding import InvalidArgument, encode_texts
from strsearch.suffix_array import lcp_array, suffix_array
from strsearch.utils import SP
import numpy as np

class GeneralizedSuffixArray:
    def __init__(self, texts):
        if not isinstance(texts, (list, tuple)) or len(texts) < 2:
            raise InvalidArgument('At least two texts are required')
        self.texts = list(texts)
        self.n_texts = len(texts)
        seqs = encode_texts(self.texts)

        lens = [len(seq) for seq in seqs]
        lowest = min((min(seq) for seq in seqs if seq), default = 0)
        self.shift = self.n_texts - lowest

        SP.header('GENERALIZED SUFFIX ARRAY',
                  '%d texts, %d symbols', (self.n_texts, sum(lens)))
        text = []
        for sentinel, seq in enumerate(seqs):
            text.extend(code + self.shift for code in seq)
            text.append(sentinel)
        self.text = tuple(text)
        self.starts = np.cumsum([0] + [l + 1 for l in lens[:-1]])
        self.colors = np.repeat(np.arange(self.n_texts), [l + 1 for l in lens])
        assert len(self.colors) == len(self.text)

        sa = suffix_array(self.text)
        _, lcp = lcp_array(self.text, sa)
        self._sa = tuple(sa)
        self._lcp = tuple(lcp)
        SP.leave()

    def __len__(self):
        return len(self.text)

    def get_suffix_array(self):
        return list(self._sa)

    def get_lcp_array(self):
        return list(self._lcp)

    def get_color(self, position):
        if not 0 <= position < len(self.text):
            raise IndexError('Position %d out of range' % position)
        return int(self.colors[position])

    def text_start(self, color):
        return int(self.starts[color])

    def substring(self, position, length):
        '''The source symbols of the given span. It must not cross a
        sentinel.'''
        color = self.get_color(position)
        ofs = position - self.text_start(color)
        source = self.texts[color]
        if isinstance(source, str):
            return source[ofs:ofs + length]
        return tuple(source[ofs:ofs + length])

# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from strsearch.coding import InvalidArgument, InvalidInput
from strsearch.generalized import GeneralizedSuffixArray
from strsearch.search import (count_unique_substrings, find_all,
                              longest_common_substrings,
                              longest_repeated_substrings,
                              search_pattern, unique_substrings)
from strsearch.suffix_array import SuffixArray, lcp_array, suffix_array

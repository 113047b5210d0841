"""Matching engine: trie lookup, sequence composition and scan-and-replace.

Public API:
- MatchTrie: Prefix trie with greedy longest-match lookup
- SequenceComposer: Extends trie matches with modifiers and joiner continuations
- MatchResult: One composed emoji found in a text buffer
- scan_and_replace(): Generic re-assembly loop used by every converter
"""

# trie must be imported first: the catalog package imports it while loading
from .trie import MatchTrie, TrieNode, TrieVerdict
from .types import MatchResult
from .composer import SequenceComposer
from .scanner import Formatter, extract_match_strings, extract_matches, scan_and_replace

__all__ = [
    "MatchTrie",
    "TrieNode",
    "TrieVerdict",
    "MatchResult",
    "SequenceComposer",
    "Formatter",
    "extract_match_strings",
    "extract_matches",
    "scan_and_replace",
]

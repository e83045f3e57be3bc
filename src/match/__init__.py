"""
Similarity engine for jaro-winkler-bytes.

Implements the Jaro-Winkler matching-window scan, transposition count and
prefix boost, with per-input match trackers.
"""

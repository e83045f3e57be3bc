"""
jaro-winkler-bytes - Jaro-Winkler similarity for byte sequences

A small, allocation-light implementation of Jaro-Winkler string similarity
for fuzzy matching, deduplication and record linkage, with a benchmark
harness comparing it against other Python implementations.
"""

from .match.jaro_winkler import jaro_winkler, similarity

__version__ = "1.0.0"
__author__ = "jaro-winkler-bytes Team"

__all__ = ["jaro_winkler", "similarity"]

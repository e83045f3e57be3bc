"""
Input normalization for jaro-winkler-bytes.

Coerces caller arguments to bytes and orders input pairs for scoring.
"""

"""
Benchmark harness for jaro-winkler-bytes.

Configuration loading and the benchmark runner used to compare this
implementation against other Jaro-Winkler libraries.
"""

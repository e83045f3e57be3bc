"""
Reporting for jaro-winkler-bytes benchmark runs.
"""

"""Infrastructure Layer — upstream client and logging setup.

Invariants:
    - All upstream calls wrapped with timeout, retry and error mapping
"""

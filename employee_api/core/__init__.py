"""Core — error hierarchy, retry policy, and pure employee queries.

Invariants:
    - No HTTP framework imports; everything here is testable without a server
"""

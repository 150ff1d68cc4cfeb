"""Employee API — CRUD proxy in front of the Mock employee store.

Invariants:
    - Package root contains no executable code beyond the version constant
"""

__version__ = "1.0.0"

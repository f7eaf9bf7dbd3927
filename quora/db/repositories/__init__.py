"""
Per-domain repository modules for database access.

Plain functions taking a ``Session``; they commit their own writes and return
ORM objects (or None when a lookup misses).
"""

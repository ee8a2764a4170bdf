"""Core Layer — pure helpers, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure (today_iso reads the clock, nothing else)
"""

"""Exercise Tracker — REST service for users and their exercise logs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"

"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store exceptions are mapped to core.errors types before leaving this layer
"""

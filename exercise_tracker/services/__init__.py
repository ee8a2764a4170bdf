"""Services Layer — one async function per API operation.

Invariants:
    - Each operation performs a single store round trip (plus the owner lookup where required)
    - Store failures are wrapped by store_operation with the operation's public message
    - Services return Pydantic response schemas, never ORM objects
"""

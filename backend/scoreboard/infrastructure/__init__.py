"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/routes/
    - All store exceptions leave this layer as StoreError subclasses
"""

"""Services Layer — statement builders/executors over an AsyncSession.

Invariants:
    - Each public operation issues exactly one SQL statement (plus its commit)
    - No retries; store failures leave as StoreError
    - Routes never build SQL themselves
"""

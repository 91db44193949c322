"""API Layer — FastAPI routes, request parameters and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; all errors share one envelope
"""

"""Scoreboard Application Package — players, games and scores over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""Services Layer — session, player, rating and reveal handlers plus snapshot loading.

Invariants:
    - Handlers own the AsyncSession for one request; commits happen here, not in routes
    - Rules come from core/ (pure); handlers only read, call core, then write

Design Decisions:
    - One handler class per aggregate for locality
"""

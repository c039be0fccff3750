"""Infrastructure Layer — database, security and logging adapters.

Invariants:
    - Only this layer talks to SQLAlchemy engines, bcrypt and JWT
    - Failures are mapped to core/errors.py types before leaving the layer
"""

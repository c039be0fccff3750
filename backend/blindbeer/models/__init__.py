"""ORM Models — SQLAlchemy declarative models for all tasting entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - TastingSession is the aggregate root; all entities scoped by session_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from blindbeer.models.session import TastingSession  # noqa: F401
from blindbeer.models.player import Player  # noqa: F401
from blindbeer.models.rating import Rating  # noqa: F401
from blindbeer.models.beer_reveal import BeerReveal  # noqa: F401

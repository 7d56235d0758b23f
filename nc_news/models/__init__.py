"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Insert order for seeding: topics, users, articles (foreign keys)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from nc_news.models.topic import Topic  # noqa: F401
from nc_news.models.user import User  # noqa: F401
from nc_news.models.article import Article  # noqa: F401

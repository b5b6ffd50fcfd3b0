"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from voter_info.models.base import Base
from voter_info.models.candidate import Candidate
from voter_info.models.contest import Contest

__all__ = [
    "Base",
    "Candidate",
    "Contest",
]

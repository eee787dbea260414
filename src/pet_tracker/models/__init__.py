"""ORM model registry — import all models so Alembic autogenerate discovers them."""

from pet_tracker.models.sighting import Sighting

__all__ = [
    "Sighting",
]

"""
Shared Pydantic models.
"""

from pydantic import BaseModel, Field

# Range of a SQLite INTEGER column
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class Product(BaseModel):
    """A product row. `id` is assigned by the database and ignored on create."""
    id: int = Field(default=0, ge=MIN_ID, le=MAX_ID)
    name: str
    price: float

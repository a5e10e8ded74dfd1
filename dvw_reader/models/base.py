"""Shared base for scout file models."""

from pydantic import BaseModel


class ScoutModel(BaseModel):
    """Base model for every decoded entity; instances are immutable once built."""

    class Config:
        """Pydantic configuration."""

        frozen = True

"""Catalog entities."""

from domain.entities.genre import Genre
from domain.entities.song import Song

__all__ = ["Genre", "Song"]

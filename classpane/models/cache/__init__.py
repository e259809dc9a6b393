"""Caches owned by the classes engine."""

from classpane.models.cache.class_set_cache import ClassSet, ClassSetCache

__all__ = [
    "ClassSet",
    "ClassSetCache",
]

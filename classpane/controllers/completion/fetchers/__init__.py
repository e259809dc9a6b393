"""Fetchers for class-name completion data."""

from classpane.controllers.completion.fetchers.class_name_fetcher import ClassNameFetcher

__all__ = [
    "ClassNameFetcher",
]

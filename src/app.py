"""Application composition root.

This module wires together configuration and the response cache for the chat runtime. The cache
is not used by intent classification; it is held here for the movie-database lookups that will
answer classified intents.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.services.cache import FileCache


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    cache: FileCache


def create_app(settings: Settings) -> App:
    """Create the application container.

    Note:
        The cache directory is created lazily on the first write.
    """

    return App(settings=settings, cache=FileCache(settings.cache_dir))

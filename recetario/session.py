import asyncio
import logging

from recetario.models import EMPTY_RECIPE, Recipe


logger = logging.getLogger(__name__)


class Session:
    """The latest recipe and every recipe produced since the process started.

    Writes go through one lock so `latest` is always the last entry of
    `history`. The lock is not held across the completion call, so
    concurrent requests land in the order their calls finish.
    """

    def __init__(self) -> None:
        self._latest = EMPTY_RECIPE
        self._history: list[Recipe] = []
        self._lock = asyncio.Lock()

    @property
    def latest(self) -> Recipe:
        return self._latest

    @property
    def history(self) -> tuple[Recipe, ...]:
        return tuple(self._history)

    async def record(self, recipe: Recipe) -> None:
        async with self._lock:
            self._latest = recipe
            self._history.append(recipe)
            logger.info("Recorded %r (%d in history)", recipe.name, len(self._history))

    async def snapshot(self) -> tuple[Recipe, tuple[Recipe, ...]]:
        async with self._lock:
            return self._latest, tuple(self._history)

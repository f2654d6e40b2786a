"""
Request-scoped lookup memoization and the data snapshot it produces.

A LookupCache lives for one calculation only. Each (resolver, key) pair
is fetched at most once; concurrent callers for the same pair await the
same task.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from src.core.entities.planning import PlanNote, ResolvedItem
from src.core.entities.recipe import RecipeLine
from src.core.entities.stock import BottleStock, IngredientStock


class LookupCache:
    """Memoizes lookups for the duration of one planning request."""

    def __init__(self):
        self._tasks: dict[tuple[str, str], asyncio.Task] = {}

    async def get_or_load(
        self,
        resolver: str,
        key: str,
        loader: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached result for (resolver, key), loading it once."""
        task = self._tasks.get((resolver, key))
        if task is None:
            task = asyncio.ensure_future(loader())
            self._tasks[(resolver, key)] = task
        return await task

    def __contains__(self, entry: tuple[str, str]) -> bool:
        return entry in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)


@dataclass
class PlanningSnapshot:
    """Everything the pure compute phase needs besides the resolved items."""

    recipes: dict[str, list[RecipeLine]] = field(default_factory=dict)
    ingredient_stock: dict[str, IngredientStock | None] = field(default_factory=dict)
    bottle_stock: dict[str, BottleStock | None] = field(default_factory=dict)
    notes: list[PlanNote] = field(default_factory=list)
    failed_recipes: set[str] = field(default_factory=set)

    def recipe_for(self, item: ResolvedItem) -> list[RecipeLine]:
        if not item.base_product_id:
            return []
        return self.recipes.get(item.base_product_id, [])

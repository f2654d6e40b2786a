"""
Production planner.

Computes material, packaging and cost requirements for a batch of
planning items in two phases:

1. Resolution: catalog, recipe and stock lookups for each distinct key,
   fanned out concurrently with a per-lookup timeout and a concurrency cap.
2. Compute: explosion, aggregation, sufficiency and report assembly.
   Pure and synchronous, so it can be tested without any store.

Per-item problems end up in report.issues; degraded lookups end up in
report.notes. Only a plan with no valid item fails as a whole.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable, Sequence
from datetime import date
from typing import Any

from src.config import get_logger, get_settings
from src.core.entities.planning import (
    ItemIssue,
    NoteKind,
    PlanningItem,
    PlanNote,
    PlanReport,
    ResolvedItem,
)
from src.core.exceptions import EmptyPlanError, LookupFailure, MissingCapacityError
from src.core.interfaces import ICatalogStore, IRecipeStore, IStockStore
from src.core.services.aggregator import RequirementAggregator
from src.core.services.bom_explosion import BomExplosionEngine
from src.core.services.catalog_resolver import CatalogResolver
from src.core.services.lookup import LookupCache, PlanningSnapshot
from src.core.services.plan_normalizer import PlanRequestNormalizer, issue_from_error
from src.core.services.report_assembler import PlanReportAssembler
from src.core.services.sufficiency import SufficiencyEvaluator

logger = get_logger(__name__)


class ProductionPlannerService:
    """
    Production requirements and costing engine.

    Stateless between calls: every calculation gets its own LookupCache
    and semaphore.
    """

    def __init__(
        self,
        catalog_store: ICatalogStore,
        recipe_store: IRecipeStore,
        stock_store: IStockStore,
        lookup_timeout: float | None = None,
        max_concurrent_lookups: int | None = None,
        assembler: PlanReportAssembler | None = None,
    ):
        """
        Initialize the planner.

        Args:
            catalog_store: Sellable product lookups
            recipe_store: Recipe lookups by base product
            stock_store: Ingredient and bottle stock lookups
            lookup_timeout: Seconds allowed per lookup (defaults to settings)
            max_concurrent_lookups: Concurrency cap (defaults to settings)
            assembler: Report assembler (defaults to settings rounding)
        """
        planning = get_settings().planning

        self.catalog_store = catalog_store
        self.recipe_store = recipe_store
        self.stock_store = stock_store
        self.lookup_timeout = (
            lookup_timeout if lookup_timeout is not None else planning.lookup_timeout
        )
        self.max_concurrent_lookups = max_concurrent_lookups or planning.max_concurrent_lookups

        self._normalizer = PlanRequestNormalizer()
        self._resolver = CatalogResolver()
        self._explosion = BomExplosionEngine()
        self._aggregator = RequirementAggregator()
        self._evaluator = SufficiencyEvaluator()
        self._assembler = assembler or PlanReportAssembler(
            currency_places=planning.currency_places,
            quantity_places=planning.quantity_places,
            volume_places=planning.volume_places,
        )

    @property
    def assembler(self) -> PlanReportAssembler:
        return self._assembler

    async def calculate(
        self,
        items: Sequence[PlanningItem],
        cache: LookupCache | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> PlanReport:
        """
        Calculate a production plan.

        Args:
            items: Planning items in request order
            cache: Request-scoped lookup cache (a new one when omitted)
            start_date: Range start, for plans built from orders
            end_date: Range end, for plans built from orders

        Returns:
            PlanReport with lines, totals, issues and notes

        Raises:
            EmptyPlanError: If no item survives validation and resolution
        """
        cache = cache if cache is not None else LookupCache()
        semaphore = asyncio.Semaphore(self.max_concurrent_lookups)

        resolved, issues = await self.resolve_items(items, cache, semaphore)
        snapshot = await self.load_snapshot(resolved, cache, semaphore)
        report = self.compute_plan(resolved, snapshot, issues, start_date, end_date)

        logger.info(
            "production_plan_calculated",
            items=len(items),
            resolved=len(resolved),
            rejected=len(report.issues),
            materials=len(report.materials),
            bottles=len(report.bottles),
            notes=len(report.notes),
            has_shortage=report.has_shortage,
            lookups=len(cache),
        )
        return report

    # Resolution phase

    async def _lookup(
        self,
        cache: LookupCache,
        semaphore: asyncio.Semaphore,
        resolver: str,
        key: str,
        fetch: Callable[[str], Awaitable[Any]],
    ) -> Any:
        async def load() -> Any:
            async with semaphore:
                try:
                    return await asyncio.wait_for(fetch(key), timeout=self.lookup_timeout)
                except asyncio.TimeoutError as e:
                    logger.warning("lookup_timeout", resolver=resolver, key=key)
                    raise LookupFailure(
                        resolver, key, f"timed out after {self.lookup_timeout}s"
                    ) from e
                except LookupFailure:
                    raise
                except Exception as e:
                    logger.warning("lookup_failed", resolver=resolver, key=key, error=str(e))
                    raise LookupFailure(resolver, key, str(e)) from e

        return await cache.get_or_load(resolver, key, load)

    async def _lookup_many(
        self,
        cache: LookupCache,
        semaphore: asyncio.Semaphore,
        resolver: str,
        keys: Iterable[str],
        fetch: Callable[[str], Awaitable[Any]],
    ) -> tuple[dict[str, Any], dict[str, LookupFailure]]:
        """Fetch distinct keys concurrently; split results from failures."""
        distinct = sorted(set(keys))
        results = await asyncio.gather(
            *(self._lookup(cache, semaphore, resolver, key, fetch) for key in distinct),
            return_exceptions=True,
        )

        found: dict[str, Any] = {}
        failed: dict[str, LookupFailure] = {}
        for key, result in zip(distinct, results):
            if isinstance(result, LookupFailure):
                failed[key] = result
            elif isinstance(result, BaseException):
                raise result
            else:
                found[key] = result
        return found, failed

    async def resolve_items(
        self,
        items: Sequence[PlanningItem],
        cache: LookupCache,
        semaphore: asyncio.Semaphore,
    ) -> tuple[list[ResolvedItem], list[ItemIssue]]:
        """Validate items against the catalog and resolve their bottles."""
        products, failed = await self._lookup_many(
            cache,
            semaphore,
            "catalog",
            (item.sellable_product_id for item in items),
            self.catalog_store.get_sellable_product,
        )

        normalized = self._normalizer.normalize(items, products, failed)
        issues = list(normalized.issues)
        resolved: list[ResolvedItem] = []

        for validated in normalized.items:
            try:
                resolved.append(self._resolver.resolve(validated))
            except MissingCapacityError as e:
                logger.info(
                    "plan_item_rejected",
                    index=validated.index,
                    sellable_product_id=validated.item.sellable_product_id,
                    error_code=e.code,
                )
                issues.append(issue_from_error(validated.index, validated.item, e))

        if not resolved:
            raise EmptyPlanError([issue.model_dump() for issue in issues])

        return resolved, issues

    async def load_snapshot(
        self,
        resolved: Sequence[ResolvedItem],
        cache: LookupCache,
        semaphore: asyncio.Semaphore,
    ) -> PlanningSnapshot:
        """Fetch recipes, then stock for every distinct ingredient and bottle."""
        snapshot = PlanningSnapshot()

        base_ids = {item.base_product_id for item in resolved if item.base_product_id}
        recipes, failed_recipes = await self._lookup_many(
            cache, semaphore, "recipe", base_ids, self.recipe_store.get_recipe
        )
        for base_id in sorted(base_ids):
            snapshot.recipes[base_id] = list(recipes.get(base_id) or [])
        for base_id, failure in failed_recipes.items():
            snapshot.failed_recipes.add(base_id)
            snapshot.notes.append(
                PlanNote(kind=NoteKind.LOOKUP_FAILURE, key=base_id, message=failure.message)
            )

        ingredient_ids = {
            line.ingredient_id for lines in snapshot.recipes.values() for line in lines
        }
        bottle_ids = {item.bottle_type_id for item in resolved}

        (ingredients, failed_ingredients), (bottles, failed_bottles) = await asyncio.gather(
            self._lookup_many(
                cache,
                semaphore,
                "ingredient_stock",
                ingredient_ids,
                self.stock_store.get_ingredient_stock,
            ),
            self._lookup_many(
                cache,
                semaphore,
                "bottle_stock",
                bottle_ids,
                self.stock_store.get_bottle_stock,
            ),
        )

        for ingredient_id in sorted(ingredient_ids):
            snapshot.ingredient_stock[ingredient_id] = ingredients.get(ingredient_id)
        for bottle_type_id in sorted(bottle_ids):
            snapshot.bottle_stock[bottle_type_id] = bottles.get(bottle_type_id)

        for failures in (failed_ingredients, failed_bottles):
            for key, failure in failures.items():
                snapshot.notes.append(
                    PlanNote(kind=NoteKind.LOOKUP_FAILURE, key=key, message=failure.message)
                )
        snapshot.notes.extend(
            PlanNote(
                kind=NoteKind.MISSING_STOCK,
                key=key,
                message=f"No stock record for ingredient '{key}'; treated as zero stock",
            )
            for key, record in snapshot.ingredient_stock.items()
            if record is None and key not in failed_ingredients
        )
        snapshot.notes.extend(
            PlanNote(
                kind=NoteKind.MISSING_STOCK,
                key=key,
                message=f"No stock record for bottle type '{key}'; treated as zero stock",
            )
            for key, record in snapshot.bottle_stock.items()
            if record is None and key not in failed_bottles
        )

        return snapshot

    # Compute phase

    def compute_plan(
        self,
        resolved: Sequence[ResolvedItem],
        snapshot: PlanningSnapshot,
        issues: Sequence[ItemIssue] = (),
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> PlanReport:
        """Explode, aggregate, evaluate and assemble. No I/O."""
        exploded = [self._explosion.explode(item, snapshot.recipe_for(item)) for item in resolved]

        notes = list(snapshot.notes)
        missing_recipes = {
            e.item.base_product_id or e.item.sellable_product_id
            for e in exploded
            if not e.has_recipe and e.item.base_product_id not in snapshot.failed_recipes
        }
        notes.extend(
            PlanNote(
                kind=NoteKind.MISSING_RECIPE,
                key=key,
                message=f"No recipe for '{key}'; material cost counted as zero",
            )
            for key in sorted(missing_recipes)
        )

        aggregation = self._aggregator.aggregate(exploded)
        materials = self._evaluator.evaluate_materials(
            aggregation.materials, snapshot.ingredient_stock
        )
        bottles = self._evaluator.evaluate_bottles(aggregation.bottles, snapshot.bottle_stock)

        ingredient_prices = {m.ingredient_id: m.average_price for m in materials}
        bottle_prices = {b.bottle_type_id: b.unit_price for b in bottles}

        product_lines = self._aggregator.cost_product_lines(
            aggregation.products, ingredient_prices, bottle_prices
        )
        by_date = {
            day: self._aggregator.cost_product_lines(tallies, ingredient_prices, bottle_prices)
            for day, tallies in aggregation.by_date.items()
        }

        return self._assembler.assemble(
            product_lines,
            materials,
            bottles,
            issues=issues,
            notes=notes,
            by_date=by_date,
            start_date=start_date,
            end_date=end_date,
        )

"""
Request normalizer for production plans.

Validates each planning item on its own so one bad line never hides the
rest of the plan. Repeated products are kept as separate items; the
aggregator merges them.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from src.config import get_logger
from src.core.entities.catalog import SimpleProduct, VariationProduct
from src.core.entities.planning import ItemIssue, PlanningItem
from src.core.exceptions import (
    EmptyPlanError,
    InvalidQuantityError,
    LookupFailure,
    PlannerError,
    VariationMismatchError,
)

logger = get_logger(__name__)


@dataclass
class ValidatedItem:
    """Planning item that passed validation, paired with its catalog record."""

    index: int
    item: PlanningItem
    product: SimpleProduct | VariationProduct


@dataclass
class NormalizedPlan:
    """Result of normalizing a planning request."""

    items: list[ValidatedItem] = field(default_factory=list)
    issues: list[ItemIssue] = field(default_factory=list)


def issue_from_error(index: int, item: PlanningItem, error: PlannerError) -> ItemIssue:
    """Build the per-item issue reported for a rejected planning item."""
    return ItemIssue(
        index=index,
        sellable_product_id=item.sellable_product_id,
        variation_id=item.variation_id,
        error_code=error.code,
        message=error.message,
    )


class PlanRequestNormalizer:
    """Validates planning items against the catalog."""

    def normalize(
        self,
        items: Sequence[PlanningItem],
        products: Mapping[str, SimpleProduct | VariationProduct | None],
        failed_lookups: Mapping[str, LookupFailure] | None = None,
    ) -> NormalizedPlan:
        """
        Validate planning items.

        Args:
            items: Planning items in request order.
            products: Catalog records keyed by sellable product ID
                (None when the catalog has no such product).
            failed_lookups: Catalog lookups that raised, keyed by product ID.

        Returns:
            Validated items plus per-item issues.

        Raises:
            EmptyPlanError: If no item is valid.
        """
        failed_lookups = failed_lookups or {}
        result = NormalizedPlan()

        for index, item in enumerate(items):
            try:
                product = self._validate(index, item, products, failed_lookups)
            except PlannerError as e:
                logger.info(
                    "plan_item_rejected",
                    index=index,
                    sellable_product_id=item.sellable_product_id,
                    error_code=e.code,
                )
                result.issues.append(issue_from_error(index, item, e))
                continue
            result.items.append(ValidatedItem(index=index, item=item, product=product))

        if not result.items:
            raise EmptyPlanError([issue.model_dump() for issue in result.issues])

        return result

    def _validate(
        self,
        index: int,
        item: PlanningItem,
        products: Mapping[str, SimpleProduct | VariationProduct | None],
        failed_lookups: Mapping[str, LookupFailure],
    ) -> SimpleProduct | VariationProduct:
        if item.quantity <= 0:
            raise InvalidQuantityError(index, item.sellable_product_id, item.quantity)

        if item.sellable_product_id in failed_lookups:
            raise failed_lookups[item.sellable_product_id]

        product = products.get(item.sellable_product_id)
        if product is None:
            raise LookupFailure(
                "catalog", item.sellable_product_id, "sellable product not found"
            )

        if isinstance(product, VariationProduct):
            if not item.variation_id:
                raise VariationMismatchError(
                    index,
                    item.sellable_product_id,
                    None,
                    "variation_id is required for a variation product",
                )
            if product.get_variation(item.variation_id) is None:
                raise VariationMismatchError(
                    index,
                    item.sellable_product_id,
                    item.variation_id,
                    "variation does not belong to this product",
                )
        elif item.variation_id and item.variation_id not in product.variation_ids:
            raise VariationMismatchError(
                index,
                item.sellable_product_id,
                item.variation_id,
                "variation does not belong to this simple product",
            )

        return product

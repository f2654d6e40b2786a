"""Core domain entities."""

from src.core.entities.catalog import (
    BottleType,
    ProductType,
    ProductVariation,
    SellableProduct,
    SimpleProduct,
    VariationProduct,
    sellable_product_adapter,
)
from src.core.entities.planning import (
    BottleRequirement,
    DailyPlan,
    ItemIssue,
    MaterialRequirement,
    NoteKind,
    OrderReference,
    PlanningItem,
    PlanNote,
    PlanReport,
    PlanTotals,
    ProductCostLine,
    ResolvedItem,
)
from src.core.entities.order import OrderLine, OrderStatus
from src.core.entities.recipe import RecipeLine
from src.core.entities.stock import BottleStock, IngredientStock

__all__ = [
    # Catalog entities
    "BottleType",
    "ProductType",
    "ProductVariation",
    "SellableProduct",
    "SimpleProduct",
    "VariationProduct",
    "sellable_product_adapter",
    # Recipe and stock entities
    "RecipeLine",
    "IngredientStock",
    "BottleStock",
    # Order entities
    "OrderLine",
    "OrderStatus",
    # Planning entities
    "PlanningItem",
    "OrderReference",
    "ResolvedItem",
    "ItemIssue",
    "NoteKind",
    "PlanNote",
    "MaterialRequirement",
    "BottleRequirement",
    "ProductCostLine",
    "PlanTotals",
    "DailyPlan",
    "PlanReport",
]

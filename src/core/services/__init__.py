"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.aggregator import Aggregation, RequirementAggregator
from src.core.services.bom_explosion import BomExplosionEngine, ExplodedItem
from src.core.services.catalog_resolver import CatalogResolver
from src.core.services.lookup import LookupCache, PlanningSnapshot
from src.core.services.plan_normalizer import NormalizedPlan, PlanRequestNormalizer
from src.core.services.production_planner import ProductionPlannerService
from src.core.services.report_assembler import PlanReportAssembler
from src.core.services.sufficiency import SufficiencyEvaluator

__all__ = [
    # Orchestration
    "ProductionPlannerService",
    "LookupCache",
    "PlanningSnapshot",
    # Validation and resolution
    "PlanRequestNormalizer",
    "NormalizedPlan",
    "CatalogResolver",
    # Compute
    "BomExplosionEngine",
    "ExplodedItem",
    "RequirementAggregator",
    "Aggregation",
    "SufficiencyEvaluator",
    "PlanReportAssembler",
]

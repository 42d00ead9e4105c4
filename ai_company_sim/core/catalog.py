"""
AI Company Simulation — Catalog Registry
Immutable models, upgrades, and funding rounds with id and category lookup.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging
import operator

from ..config import Category, UpgradeType
from .. import data

logger = logging.getLogger(__name__)

EFFECT_FIELDS = (
    "compute_gain",
    "energy_cost",
    "research_boost",
    "revenue_boost",
    "expense_reduction",
    "efficiency_boost",
)


@dataclass(frozen=True)
class Effects:
    """
    Optional numeric adjustments carried by an upgrade or a model.
    
    None means the effect is absent. Additive: compute_gain, energy_cost,
    research_boost, revenue_boost. Multiplicative: expense_reduction
    (expenses *= 1 - value) and efficiency_boost (capacity *= value).
    """
    compute_gain: Optional[float] = None
    energy_cost: Optional[float] = None
    research_boost: Optional[float] = None
    revenue_boost: Optional[float] = None
    expense_reduction: Optional[float] = None
    efficiency_boost: Optional[float] = None
    
    @classmethod
    def from_row(cls, row: Mapping) -> "Effects":
        values = {}
        for name in EFFECT_FIELDS:
            value = row.get(name)
            if value is not None:
                values[name] = float(value)
        return cls(**values)
    
    def present(self) -> Dict[str, float]:
        """Effects that are defined, in application order."""
        return {name: getattr(self, name) for name in EFFECT_FIELDS
                if getattr(self, name) is not None}


@dataclass(frozen=True)
class ModelSpec:
    """A researchable model. Effects apply when training completes."""
    id: str
    category: Category
    name: str
    cost: float
    compute_required: float
    research_time: float
    year: int = 0
    parameters: str = ""
    description: str = ""
    effects: Effects = field(default_factory=Effects)


@dataclass(frozen=True)
class UpgradeSpec:
    """A one-time purchase. Effects apply immediately."""
    id: str
    upgrade_type: UpgradeType
    name: str
    cost: float
    description: str = ""
    effects: Effects = field(default_factory=Effects)


@dataclass(frozen=True)
class FundingRound:
    """A one-time capital injection."""
    id: str
    name: str
    amount: float
    equity: str = ""
    description: str = ""


CategoryKey = Union[Category, str]
UpgradeTypeKey = Union[UpgradeType, str]

_CATEGORIES = {c.value: c for c in Category}
_UPGRADE_TYPES = {t.value: t for t in UpgradeType}


def resolve_category(category: CategoryKey) -> Optional[Category]:
    """Accept a Category or its name; None when unknown."""
    if isinstance(category, Category):
        return category
    return _CATEGORIES.get(category)


def resolve_upgrade_type(upgrade_type: UpgradeTypeKey) -> Optional[UpgradeType]:
    if isinstance(upgrade_type, UpgradeType):
        return upgrade_type
    return _UPGRADE_TYPES.get(upgrade_type)


def _check_non_negative(item_id: str, **values: float):
    for name, value in values.items():
        if not value >= 0:
            raise ValueError(f"Negative {name} for {item_id}: {value}")

class Catalog:
    """
    Single read-only registry of everything the player can buy.
    
    Provides:
    - Ordered model lists per category (index = research frontier position)
    - Flat id lookup for models, upgrades, and funding rounds
    - Upgrades grouped by type
    """
    
    def __init__(
        self,
        models: Iterable[ModelSpec] = (),
        upgrades: Iterable[UpgradeSpec] = (),
        funding_rounds: Iterable[FundingRound] = (),
    ):
        self._by_category: Dict[Category, Tuple[ModelSpec, ...]] = {}
        self._models: Dict[str, ModelSpec] = {}
        self._upgrades: Dict[str, UpgradeSpec] = {}
        self._by_type: Dict[UpgradeType, Tuple[UpgradeSpec, ...]] = {}
        self._funding: Dict[str, FundingRound] = {}
        
        grouped: Dict[Category, List[ModelSpec]] = {c: [] for c in Category}
        for model in models:
            if model.id in self._models:
                raise ValueError(f"Duplicate model id: {model.id}")
            _check_non_negative(model.id, cost=model.cost,
                                compute_required=model.compute_required,
                                research_time=model.research_time)
            self._models[model.id] = model
            grouped[model.category].append(model)
        self._by_category = {c: tuple(items) for c, items in grouped.items()}
        
        typed: Dict[UpgradeType, List[UpgradeSpec]] = {t: [] for t in UpgradeType}
        for upgrade in upgrades:
            if upgrade.id in self._upgrades:
                raise ValueError(f"Duplicate upgrade id: {upgrade.id}")
            _check_non_negative(upgrade.id, cost=upgrade.cost)
            self._upgrades[upgrade.id] = upgrade
            typed[upgrade.upgrade_type].append(upgrade)
        self._by_type = {t: tuple(items) for t, items in typed.items()}
        
        for funding_round in funding_rounds:
            if funding_round.id in self._funding:
                raise ValueError(f"Duplicate funding round id: {funding_round.id}")
            _check_non_negative(funding_round.id, amount=funding_round.amount)
            self._funding[funding_round.id] = funding_round
        
        logger.debug(
            f"Catalog built: {len(self._models)} models, {len(self._upgrades)} upgrades, "
            f"{len(self._funding)} funding rounds"
        )
    
    @classmethod
    def from_tables(
        cls,
        models_by_category: Mapping[str, Iterable[Mapping]],
        upgrades_by_type: Mapping[str, Iterable[Mapping]],
        funding_rounds: Iterable[Mapping],
    ) -> "Catalog":
        """Build a catalog from plain dict rows (see ai_company_sim.data)."""
        models = []
        for category_name, rows in models_by_category.items():
            category = resolve_category(category_name)
            if category is None:
                raise ValueError(f"Unknown model category: {category_name}")
            for row in rows:
                models.append(ModelSpec(
                    id=row["id"],
                    category=category,
                    name=row.get("name", row["id"]),
                    cost=float(row["cost"]),
                    compute_required=float(row["compute_required"]),
                    research_time=float(row["research_time"]),
                    year=int(row.get("year", 0)),
                    parameters=row.get("parameters", ""),
                    description=row.get("description", ""),
                    effects=Effects.from_row(row),
                ))
        
        upgrades = []
        for type_name, rows in upgrades_by_type.items():
            upgrade_type = resolve_upgrade_type(type_name)
            if upgrade_type is None:
                raise ValueError(f"Unknown upgrade type: {type_name}")
            for row in rows:
                upgrades.append(UpgradeSpec(
                    id=row["id"],
                    upgrade_type=upgrade_type,
                    name=row.get("name", row["id"]),
                    cost=float(row["cost"]),
                    description=row.get("description", ""),
                    effects=Effects.from_row(row),
                ))
        
        rounds = [
            FundingRound(
                id=row["id"],
                name=row.get("name", row["id"]),
                amount=float(row["amount"]),
                equity=row.get("equity", ""),
                description=row.get("description", ""),
            )
            for row in funding_rounds
        ]
        return cls(models, upgrades, rounds)
    
    # -- Models ---------------------------------------------------------------
    
    def get_model_list(self, category: CategoryKey) -> Tuple[ModelSpec, ...]:
        """Models of a category in research order; empty for unknown categories."""
        resolved = resolve_category(category)
        if resolved is None:
            return ()
        return self._by_category.get(resolved, ())
    
    def get_model(self, category: CategoryKey, index: int) -> Optional[ModelSpec]:
        """
        Model at a frontier position, or None.
        
        Integral floats such as 1.0 are accepted; booleans and fractional
        positions are not.
        """
        models = self.get_model_list(category)
        if isinstance(index, bool):
            return None
        if isinstance(index, float):
            if not index.is_integer():
                return None
            index = int(index)
        try:
            index = operator.index(index)
        except TypeError:
            return None
        if 0 <= index < len(models):
            return models[index]
        return None
    
    def get_model_by_id(self, model_id: str) -> Optional[ModelSpec]:
        return self._models.get(model_id)
    
    @property
    def models(self) -> Tuple[ModelSpec, ...]:
        return tuple(self._models.values())
    
    # -- Upgrades -------------------------------------------------------------
    
    def get_upgrades(self, upgrade_type: UpgradeTypeKey) -> Tuple[UpgradeSpec, ...]:
        resolved = resolve_upgrade_type(upgrade_type)
        if resolved is None:
            return ()
        return self._by_type.get(resolved, ())
    
    def get_upgrade(self, upgrade_id: str) -> Optional[UpgradeSpec]:
        return self._upgrades.get(upgrade_id)
    
    @property
    def upgrades(self) -> Tuple[UpgradeSpec, ...]:
        return tuple(self._upgrades.values())
    
    # -- Funding --------------------------------------------------------------
    
    def get_funding_round(self, round_id: str) -> Optional[FundingRound]:
        return self._funding.get(round_id)
    
    @property
    def funding_rounds(self) -> Tuple[FundingRound, ...]:
        return tuple(self._funding.values())
    
    def __repr__(self) -> str:
        return (f"Catalog({len(self._models)} models, {len(self._upgrades)} upgrades, "
                f"{len(self._funding)} funding rounds)")


# Default catalog
CATALOG = Catalog.from_tables(
    data.MODELS_BY_CATEGORY,
    data.UPGRADES_BY_TYPE,
    data.FUNDING_ROUNDS,
)

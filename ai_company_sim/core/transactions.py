"""
AI Company Simulation — Transactions
Player-initiated purchases: upgrades, funding rounds, and research projects.

Every operation validates all of its preconditions before touching the
state, so a failed call leaves the state exactly as it was.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from ..config import LedgerConfig, LEDGER, UpgradeType
from .catalog import (
    Catalog, CATALOG, CategoryKey, Effects, FundingRound, UpgradeSpec, UpgradeTypeKey,
    resolve_category, resolve_upgrade_type,
)
from .ledger import push_news
from .state import ActiveResearch, CompanyState
from .views import format_currency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResearchResult:
    """Outcome of start_research. The reason is informational only."""
    success: bool
    reason: str = ""
    
    def __bool__(self) -> bool:
        return self.success


# Failure reasons, in the order they are checked
MODEL_NOT_FOUND = "Model not found."
PREVIOUS_MODEL_REQUIRED = "Research previous model first."
ALREADY_TRAINING = "Another project is already training."
INSUFFICIENT_CASH = "Insufficient cash."
INSUFFICIENT_COMPUTE = "Insufficient compute capacity."


def can_afford(state: CompanyState, cost: float) -> bool:
    return state.cash >= cost


def apply_upgrade_effects(state: CompanyState, effects: Effects):
    """
    Apply purchase effects in a fixed order.
    
    Order: compute gain, energy cost (floored at 0), research boost,
    revenue boost, expense reduction (multiplicative). Zero values are
    skipped. Efficiency boosts only apply when a model is deployed.
    """
    for name, value in effects.present().items():
        if not value:
            continue
        if name == "compute_gain":
            state.compute_capacity += value
        elif name == "energy_cost":
            state.energy_usage = max(0.0, state.energy_usage + value)
        elif name == "research_boost":
            state.research_speed += value
            if state.research_speed <= 0:
                logger.warning(f"Research speed is now {state.research_speed:.2f}; progress will stall")
        elif name == "revenue_boost":
            state.revenue_per_second += value
        elif name == "expense_reduction":
            state.expenses_per_second *= 1 - value


def purchase_upgrade(
    state: CompanyState,
    upgrade: UpgradeSpec,
    upgrade_type: Optional[UpgradeTypeKey] = None,
    ledger: LedgerConfig = LEDGER,
) -> bool:
    """
    Buy a one-time upgrade.
    
    Args:
        upgrade_type: Group the upgrade is bought from; defaults to the
            upgrade's own type. Partnerships are also recorded separately.
    
    Returns:
        True if purchased; False if already owned or unaffordable.
    """
    resolved = resolve_upgrade_type(upgrade_type) if upgrade_type is not None else upgrade.upgrade_type
    type_name = resolved.value if resolved else str(upgrade_type)
    
    if upgrade.cost < 0:
        raise ValueError(f"Cannot purchase {upgrade.id} at negative cost: {upgrade.cost}")
    
    if upgrade.id in state.purchased_upgrades:
        logger.debug(f"Upgrade {upgrade.id} already purchased")
        return False
    if not can_afford(state, upgrade.cost):
        logger.debug(f"Cannot afford {upgrade.id}: {state.cash:.0f} < {upgrade.cost:.0f}")
        return False
    
    state.cash -= upgrade.cost
    state.purchased_upgrades.add(upgrade.id)
    if resolved == UpgradeType.PARTNERSHIPS:
        state.partnerships.add(upgrade.id)
    push_news(state, f"{upgrade.name} deployed, improving {type_name} operations.", ledger)
    
    apply_upgrade_effects(state, upgrade.effects)
    
    logger.info(f"Purchased {upgrade.id} for {format_currency(upgrade.cost)}")
    return True


def unlock_funding(
    state: CompanyState,
    funding_round: FundingRound,
    ledger: LedgerConfig = LEDGER,
) -> bool:
    """
    Raise a funding round once.
    
    Returns:
        True if raised; False if the round was already claimed.
    """
    if funding_round.amount < 0:
        raise ValueError(f"Cannot raise negative amount from {funding_round.id}: {funding_round.amount}")
    
    if funding_round.id in state.funding_claimed:
        logger.debug(f"Funding round {funding_round.id} already claimed")
        return False
    
    state.cash += funding_round.amount
    state.funding += funding_round.amount
    state.funding_claimed.add(funding_round.id)
    push_news(
        state,
        f"{funding_round.name} secured for {format_currency(funding_round.amount)} "
        f"({funding_round.equity}).",
        ledger,
    )
    
    logger.info(f"Raised {funding_round.id}: {format_currency(funding_round.amount)}")
    return True


def start_research(
    state: CompanyState,
    category: CategoryKey,
    index: int,
    catalog: Catalog = CATALOG,
    ledger: LedgerConfig = LEDGER,
) -> ResearchResult:
    """
    Begin training the model at a category's frontier position.
    
    Models must be researched in order within a category, and only one
    project may train at a time across the company.
    """
    model = catalog.get_model(category, index)
    if model is None:
        return _reject(category, index, MODEL_NOT_FOUND)
    
    category_name = model.category.value
    if index > state.unlocked_models.get(category_name, 0):
        return _reject(category, index, PREVIOUS_MODEL_REQUIRED)
    if state.active_research is not None:
        return _reject(category, index, ALREADY_TRAINING)
    if not can_afford(state, model.cost):
        return _reject(category, index, INSUFFICIENT_CASH)
    if state.compute_capacity < model.compute_required:
        return _reject(category, index, INSUFFICIENT_COMPUTE)
    
    effects = model.effects
    state.cash -= model.cost
    state.active_research = ActiveResearch(
        category=category_name,
        model_id=model.id,
        duration=model.research_time,
        compute_required=model.compute_required,
        name=model.name,
        description=model.description,
        revenue_boost=effects.revenue_boost or 0.0,
        research_boost=effects.research_boost or 0.0,
        efficiency_boost=effects.efficiency_boost or 0.0,
        energy_cost=effects.energy_cost or 0.0,
    )
    push_news(state, f"Training {model.name} ({model.year}) begins. {model.description}", ledger)
    
    logger.info(f"Research started: {model.id} ({category_name} #{index})")
    return ResearchResult(True)


def _reject(category: CategoryKey, index: int, reason: str) -> ResearchResult:
    resolved = resolve_category(category)
    name = resolved.value if resolved else category
    logger.debug(f"Research {name} #{index} rejected: {reason}")
    return ResearchResult(False, reason)

"""
AI Company Simulation — Read-Only Views
Formatting and lookups used by presentation adapters. Nothing here mutates state.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .catalog import Catalog, CATALOG, CategoryKey, FundingRound, ModelSpec, UpgradeSpec
from .state import ActiveResearch, CompanyState


def format_number(value: float) -> str:
    """Compact display: 1.23B, 4.56M, 7.8K, or a whole number."""
    if value >= 1_000_000_000:
        return f"{value / 1_000_000_000:.2f}B"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value >= 1000:
        return f"{value / 1000:.1f}K"
    return f"{value:.0f}"


def format_currency(value: float) -> str:
    return f"${format_number(value)}"


def describe_model(model: ModelSpec) -> str:
    return (f"{model.description} Requires {format_number(model.compute_required)} "
            f"compute and {format_currency(model.cost)}.")


class ResearchStatus(Enum):
    """How a research button should present a model."""
    DEPLOYED = auto()   # Already trained
    LOCKED = auto()     # Earlier model in the category not yet trained
    TRAINING = auto()   # This model is the active project
    BUSY = auto()       # Another project is training
    AVAILABLE = auto()  # Can be started (cash and compute permitting)


@dataclass(frozen=True)
class UpgradeView:
    upgrade: UpgradeSpec
    purchased: bool


@dataclass(frozen=True)
class FundingView:
    funding_round: FundingRound
    claimed: bool


@dataclass(frozen=True)
class ActiveModelView:
    project: ActiveResearch
    model: ModelSpec
    progress_percent: float


def get_infrastructure(state: CompanyState, catalog: Catalog = CATALOG) -> List[UpgradeView]:
    """Compute upgrades with their purchase flags."""
    return [UpgradeView(upgrade, upgrade.id in state.purchased_upgrades)
            for upgrade in catalog.get_upgrades("compute")]


def get_available_funding(state: CompanyState, catalog: Catalog = CATALOG) -> List[FundingView]:
    return [FundingView(funding_round, funding_round.id in state.funding_claimed)
            for funding_round in catalog.funding_rounds]


def get_active_model(state: CompanyState, catalog: Catalog = CATALOG) -> Optional[ActiveModelView]:
    """The training project joined with its catalog entry, or None when idle."""
    project = state.active_research
    if project is None:
        return None
    model = catalog.get_model_by_id(project.model_id)
    if model is None:
        return None
    if project.duration > 0:
        percent = min(100.0, project.progress / project.duration * 100)
    else:
        percent = 100.0
    return ActiveModelView(project, model, percent)


def research_status(
    state: CompanyState,
    category: CategoryKey,
    index: int,
    catalog: Catalog = CATALOG,
) -> Optional[ResearchStatus]:
    """Button state for a model; None if the position does not exist."""
    model = catalog.get_model(category, index)
    if model is None:
        return None
    if model.id in state.completed_models:
        return ResearchStatus.DEPLOYED
    if index > state.unlocked_models.get(model.category.value, 0):
        return ResearchStatus.LOCKED
    active = state.active_research
    if active is not None:
        if active.model_id == model.id:
            return ResearchStatus.TRAINING
        return ResearchStatus.BUSY
    return ResearchStatus.AVAILABLE

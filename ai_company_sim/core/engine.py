"""
AI Company Simulation — Tick Engine
Advances time: research progress, then the economy, then the history sample.
"""

from typing import Optional
import logging

from ..config import LedgerConfig, LEDGER
from .ledger import push_news, record_history
from .state import ActiveResearch, CompanyState

logger = logging.getLogger(__name__)

# AI power earned per unit of compute is scaled by (1 + research_boost * 5)
AI_POWER_RESEARCH_WEIGHT = 5.0


def advance_time(
    state: CompanyState,
    delta_seconds: float,
    ledger: LedgerConfig = LEDGER,
) -> Optional[str]:
    """
    Execute one tick.
    
    Steps:
    1. Advance the clock
    2. Progress (and possibly complete) the active research project
    3. Apply net revenue to cash, floored at zero
    4. Record a history point
    
    Returns:
        Id of the model completed during this tick, if any.
    """
    if delta_seconds < 0:
        raise ValueError(f"Cannot advance by negative delta: {delta_seconds}")
    
    state.time += delta_seconds
    completed = update_research(state, delta_seconds, ledger)
    update_economy(state, delta_seconds)
    record_history(state, ledger)
    return completed


def update_research(
    state: CompanyState,
    delta_seconds: float,
    ledger: LedgerConfig = LEDGER,
) -> Optional[str]:
    """Accumulate progress on the active project; complete it when due."""
    project = state.active_research
    if project is None:
        state.compute_used = 0.0
        return None
    
    project.progress += delta_seconds * state.research_speed
    # Display value only: a started project always fits
    state.compute_used = min(project.compute_required, state.compute_capacity)
    
    if project.is_complete:
        complete_research(state, project, ledger)
        state.active_research = None
        state.compute_used = 0.0
        return project.model_id
    return None


def complete_research(
    state: CompanyState,
    project: ActiveResearch,
    ledger: LedgerConfig = LEDGER,
):
    """Deploy a finished model using the effects captured when it started."""
    state.unlocked_models[project.category] = state.unlocked_models.get(project.category, 0) + 1
    state.completed_models.append(project.model_id)
    
    state.revenue_per_second += project.revenue_boost
    state.research_speed += project.research_boost
    if project.efficiency_boost:
        state.compute_capacity *= project.efficiency_boost
    state.energy_usage = max(0.0, state.energy_usage + project.energy_cost)
    state.ai_power += project.compute_required * (1 + project.research_boost * AI_POWER_RESEARCH_WEIGHT)
    
    push_news(state, f"{project.name or project.model_id} deployed! {project.description}".rstrip(), ledger)
    logger.info(f"Research complete: {project.model_id} at t={state.time:.1f}s "
                f"(AI power {state.ai_power:.0f})")


def update_economy(state: CompanyState, delta_seconds: float):
    """Apply net revenue for the elapsed time; cash never goes below zero."""
    state.cash += state.net_revenue_per_second * delta_seconds
    if state.cash < 0:
        state.cash = 0.0

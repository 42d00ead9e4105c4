"""
AI Company Simulation — Simulation Driver
Owns the company state between calls and serializes access to the core.
"""

from typing import Any, Callable, Dict, Optional
import logging

from ..config import ClockConfig, CompanyConfig, LedgerConfig, CLOCK, COMPANY, LEDGER
from .catalog import Catalog, CATALOG, CategoryKey
from .engine import advance_time
from .metrics import SessionMetrics
from .state import CompanyState, create_default_state, sanitize_state, serialize_state
from .transactions import ResearchResult, purchase_upgrade, start_research, unlock_funding
from .views import get_active_model

logger = logging.getLogger(__name__)


class Simulation:
    """
    Main simulation loop for one company.
    
    Manages:
    - Clamped time steps
    - Transactions by catalog id
    - Reset and load (state replaced wholesale)
    - Status and report dictionaries
    """
    
    def __init__(
        self,
        catalog: Catalog = CATALOG,
        clock: ClockConfig = CLOCK,
        company: CompanyConfig = COMPANY,
        ledger: LedgerConfig = LEDGER,
        state: Optional[CompanyState] = None,
    ):
        self.catalog = catalog
        self.clock = clock
        self.company = company
        self.ledger = ledger
        self.state = state if state is not None else create_default_state(company)
        
        self.total_ticks = 0
        
        # Callbacks
        self.on_tick_complete: Optional[Callable[[Dict], None]] = None
        self.on_research_complete: Optional[Callable[[str], None]] = None
        
        logger.info("Simulation initialized")
    
    @property
    def time(self) -> float:
        return self.state.time
    
    def clamp_delta(self, delta_seconds: float) -> float:
        """Keep a step within [0, max_tick_seconds]."""
        return min(max(0.0, delta_seconds), self.clock.max_tick_seconds)
    
    def tick(self, delta_seconds: float) -> Dict:
        """
        Advance by one externally timed step.
        
        Returns:
            Status dictionary after the tick.
        """
        delta = self.clamp_delta(delta_seconds)
        if delta != delta_seconds:
            logger.debug(f"Tick delta {delta_seconds} clamped to {delta}")
        
        completed = advance_time(self.state, delta, self.ledger)
        self.total_ticks += 1
        
        if completed and self.on_research_complete:
            self.on_research_complete(completed)
        
        status = self.get_status()
        if self.on_tick_complete:
            self.on_tick_complete(status)
        return status
    
    def run(self, seconds: float, step: Optional[float] = None):
        """
        Run for a span of simulated time in fixed steps.
        
        Args:
            seconds: Total simulated time to advance.
            step: Step size, clamped like any tick. Defaults to the clock's.
        """
        step = self.clamp_delta(step if step is not None else self.clock.default_step_seconds)
        if step <= 0:
            raise ValueError(f"Step must be positive, got {step}")
        
        remaining = seconds
        while remaining > 1e-9:
            delta = min(step, remaining)
            self.tick(delta)
            remaining -= delta
    
    # -- Transactions ---------------------------------------------------------
    
    def purchase_upgrade(self, upgrade_id: str) -> bool:
        upgrade = self.catalog.get_upgrade(upgrade_id)
        if upgrade is None:
            logger.debug(f"Unknown upgrade: {upgrade_id}")
            return False
        return purchase_upgrade(self.state, upgrade, upgrade.upgrade_type, self.ledger)
    
    def raise_funding(self, round_id: str) -> bool:
        funding_round = self.catalog.get_funding_round(round_id)
        if funding_round is None:
            logger.debug(f"Unknown funding round: {round_id}")
            return False
        return unlock_funding(self.state, funding_round, self.ledger)
    
    def start_research(self, category: CategoryKey, index: int) -> ResearchResult:
        return start_research(self.state, category, index, self.catalog, self.ledger)
    
    # -- Lifecycle ------------------------------------------------------------
    
    def reset(self):
        """Found a new company, discarding the current one."""
        self.state = create_default_state(self.company)
        self.total_ticks = 0
        logger.info("New company founded")
    
    def load(self, data: Any):
        """Replace the state with a sanitized copy of plain data."""
        self.state = sanitize_state(data, self.company, self.ledger)
        logger.info(f"State loaded at t={self.state.time:.1f}s")
    
    def snapshot(self) -> Dict[str, Any]:
        """Plain-data copy of the state for a persistence adapter."""
        return serialize_state(self.state)
    
    # -- Reporting ------------------------------------------------------------
    
    def get_status(self) -> Dict:
        """Get current dashboard figures."""
        state = self.state
        active = get_active_model(state, self.catalog)
        return {
            "time": state.time,
            "year": self.ledger.year_at(state.time),
            "cash": state.cash,
            "funding": state.funding,
            "net_revenue_per_second": state.net_revenue_per_second,
            "compute_capacity": state.compute_capacity,
            "compute_used": state.compute_used,
            "energy_usage": state.energy_usage,
            "research_speed": state.research_speed,
            "ai_power": state.ai_power,
            "active_research": state.active_research.model_id if state.active_research else None,
            "research_progress_percent": active.progress_percent if active else None,
            "models_deployed": len(state.completed_models),
        }
    
    def get_final_report(self) -> Dict:
        """Summary of the session so far."""
        return {
            "session_summary": {
                "elapsed_seconds": self.state.time,
                "final_year": self.ledger.year_at(self.state.time),
                "total_ticks": self.total_ticks,
            },
            "metrics": SessionMetrics.from_state(self.state).to_dict(),
            "completed_models": list(self.state.completed_models),
            "purchased_upgrades": sorted(self.state.purchased_upgrades),
            "funding_claimed": sorted(self.state.funding_claimed),
            "news": list(self.state.news),
        }

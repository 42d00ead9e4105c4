"""
AI Company Simulation — Session Metrics
Summary figures over the recorded history window.
"""

from dataclasses import dataclass, asdict
from typing import Dict
import statistics

from .state import CompanyState


@dataclass
class SessionMetrics:
    """Company performance over the current history window."""
    # Window
    history_points: int = 0
    window_seconds: float = 0.0
    
    # Economy
    cash: float = 0.0
    total_funding: float = 0.0
    mean_net_revenue: float = 0.0
    peak_net_revenue: float = 0.0
    
    # Capability
    peak_compute: float = 0.0
    ai_power: float = 0.0
    ai_power_gained: float = 0.0  # within the window
    
    # Progression
    models_deployed: int = 0
    upgrades_owned: int = 0
    partnerships: int = 0
    funding_rounds_claimed: int = 0
    
    @classmethod
    def from_state(cls, state: CompanyState) -> "SessionMetrics":
        history = state.history
        metrics = cls(
            history_points=len(history),
            cash=state.cash,
            total_funding=state.funding,
            ai_power=state.ai_power,
            models_deployed=len(state.completed_models),
            upgrades_owned=len(state.purchased_upgrades),
            partnerships=len(state.partnerships),
            funding_rounds_claimed=len(state.funding_claimed),
        )
        if len(history) > 0:
            metrics.window_seconds = history.timestamps[-1] - history.timestamps[0]
            metrics.mean_net_revenue = statistics.fmean(history.revenue)
            metrics.peak_net_revenue = max(history.revenue)
            metrics.peak_compute = max(history.compute)
            metrics.ai_power_gained = history.ai_power[-1] - history.ai_power[0]
        return metrics
    
    def to_dict(self) -> Dict:
        return asdict(self)

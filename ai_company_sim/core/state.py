"""
AI Company Simulation — Company State
The mutable simulation snapshot plus sanitize/serialize for persistence adapters.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Mapping, Optional, Set
import logging
import math

from ..config import CompanyConfig, LedgerConfig, COMPANY, LEDGER, CATEGORY_NAMES

logger = logging.getLogger(__name__)

HISTORY_SERIES = ("timestamps", "compute", "revenue", "ai_power")


@dataclass
class ActiveResearch:
    """
    The single in-flight training project.
    
    Effect deltas are copied from the catalog when training starts so that
    catalog changes never reach a project already running.
    """
    category: str
    model_id: str
    duration: float
    compute_required: float
    progress: float = 0.0
    name: str = ""
    description: str = ""
    
    # Snapshotted effects (0.0 = absent)
    revenue_boost: float = 0.0
    research_boost: float = 0.0
    efficiency_boost: float = 0.0
    energy_cost: float = 0.0
    
    @property
    def is_complete(self) -> bool:
        return self.progress >= self.duration


@dataclass
class History:
    """Four index-aligned series sampled once per tick."""
    timestamps: List[float] = field(default_factory=list)
    compute: List[float] = field(default_factory=list)
    revenue: List[float] = field(default_factory=list)  # net revenue per second
    ai_power: List[float] = field(default_factory=list)
    
    def append(self, timestamp: float, compute: float, revenue: float, ai_power: float,
               limit: int = LEDGER.history_limit):
        """Append one point, dropping the oldest once past the limit."""
        self.timestamps.append(timestamp)
        self.compute.append(compute)
        self.revenue.append(revenue)
        self.ai_power.append(ai_power)
        
        overflow = len(self.timestamps) - limit
        if overflow > 0:
            for series in (self.timestamps, self.compute, self.revenue, self.ai_power):
                del series[:overflow]
    
    def __len__(self) -> int:
        return len(self.timestamps)


@dataclass
class CompanyState:
    """Current state of the company. Owned by the driving loop."""
    time: float = 0.0
    
    # Capital
    cash: float = COMPANY.starting_cash
    funding: float = COMPANY.starting_funding
    
    # Flows
    expenses_per_second: float = COMPANY.expenses_per_second
    revenue_per_second: float = COMPANY.revenue_per_second
    
    # Infrastructure
    compute_capacity: float = COMPANY.compute_capacity
    compute_used: float = 0.0
    energy_usage: float = COMPANY.energy_usage
    research_speed: float = COMPANY.research_speed
    ai_power: float = 0.0
    
    # Progression
    unlocked_models: Dict[str, int] = field(
        default_factory=lambda: {name: 0 for name in CATEGORY_NAMES}
    )
    completed_models: List[str] = field(default_factory=list)
    purchased_upgrades: Set[str] = field(default_factory=set)
    partnerships: Set[str] = field(default_factory=set)
    funding_claimed: Set[str] = field(default_factory=set)
    active_research: Optional[ActiveResearch] = None
    
    # Bookkeeping
    history: History = field(default_factory=History)
    news: List[str] = field(default_factory=lambda: list(COMPANY.seed_news))
    
    @property
    def net_revenue_per_second(self) -> float:
        return self.revenue_per_second - self.expenses_per_second
    
    @property
    def is_idle(self) -> bool:
        return self.active_research is None


def create_default_state(config: CompanyConfig = COMPANY) -> CompanyState:
    """A freshly founded company."""
    return CompanyState(
        cash=config.starting_cash,
        funding=config.starting_funding,
        expenses_per_second=config.expenses_per_second,
        revenue_per_second=config.revenue_per_second,
        compute_capacity=config.compute_capacity,
        energy_usage=config.energy_usage,
        research_speed=config.research_speed,
        news=list(config.seed_news),
    )


# =============================================================================
# PLAIN-DATA CONVERSION
# =============================================================================

def serialize_state(state: CompanyState) -> Dict[str, Any]:
    """
    Flatten a state into plain data for a persistence adapter.
    
    Sets become sorted lists; everything else is already JSON-compatible.
    """
    return {
        "time": state.time,
        "cash": state.cash,
        "funding": state.funding,
        "expenses_per_second": state.expenses_per_second,
        "revenue_per_second": state.revenue_per_second,
        "compute_capacity": state.compute_capacity,
        "compute_used": state.compute_used,
        "energy_usage": state.energy_usage,
        "research_speed": state.research_speed,
        "ai_power": state.ai_power,
        "unlocked_models": dict(state.unlocked_models),
        "completed_models": list(state.completed_models),
        "purchased_upgrades": sorted(state.purchased_upgrades),
        "partnerships": sorted(state.partnerships),
        "funding_claimed": sorted(state.funding_claimed),
        "active_research": asdict(state.active_research) if state.active_research else None,
        "history": {name: list(getattr(state.history, name)) for name in HISTORY_SERIES},
        "news": list(state.news),
    }


def _is_number(value: Any) -> bool:
    """True for a real int or float that fits a finite float."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


class _Sanitizer:
    """Reads fields out of untrusted plain data, noting what had to be repaired."""
    
    def __init__(self, incoming: Mapping):
        self.incoming = incoming
        self.repaired: List[str] = []
    
    def number(self, key: str, default: float, minimum: Optional[float] = None) -> float:
        value = self.incoming.get(key)
        if value is None:
            return default
        if not _is_number(value):
            self.repaired.append(key)
            return default
        value = float(value)
        if minimum is not None and value < minimum:
            self.repaired.append(key)
            return minimum
        return value
    
    def id_set(self, key: str) -> Set[str]:
        value = self.incoming.get(key)
        if value is None:
            return set()
        if not isinstance(value, (list, tuple, set, frozenset)):
            self.repaired.append(key)
            return set()
        return {item for item in value if isinstance(item, str)}
    
    def unlocked_models(self) -> Dict[str, int]:
        unlocked = {name: 0 for name in CATEGORY_NAMES}
        value = self.incoming.get("unlocked_models")
        if value is None:
            return unlocked
        if not isinstance(value, Mapping):
            self.repaired.append("unlocked_models")
            return unlocked
        for name in CATEGORY_NAMES:
            frontier = value.get(name)
            if _is_number(frontier) and frontier >= 0 and float(frontier).is_integer():
                unlocked[name] = int(frontier)
            elif frontier is not None:
                self.repaired.append(f"unlocked_models.{name}")
        return unlocked
    
    def completed_models(self) -> List[str]:
        value = self.incoming.get("completed_models")
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            self.repaired.append("completed_models")
            return []
        return [item for item in value if isinstance(item, str)]
    
    def history(self, limit: int) -> History:
        value = self.incoming.get("history")
        if value is None:
            return History()
        if not isinstance(value, Mapping):
            self.repaired.append("history")
            return History()
        
        series = {}
        for name in HISTORY_SERIES:
            points = value.get(name)
            if isinstance(points, (list, tuple)) and all(_is_number(p) for p in points):
                series[name] = [float(p) for p in points]
            else:
                if points is not None:
                    self.repaired.append(f"history.{name}")
                series[name] = []
        
        # Keep the most recent points the series have in common
        length = min(min(len(points) for points in series.values()), limit)
        if any(len(points) != length for points in series.values()):
            logger.debug(f"History trimmed to {length} aligned points")
        return History(**{
            name: points[len(points) - length:] for name, points in series.items()
        })
    
    def news(self, default: List[str], limit: int) -> List[str]:
        value = self.incoming.get("news")
        if value is None:
            return list(default)
        if not isinstance(value, (list, tuple)):
            self.repaired.append("news")
            return list(default)
        entries = [entry for entry in value if isinstance(entry, str)]
        return entries[-limit:] if limit > 0 else []
    
    def active_research(self) -> Optional[ActiveResearch]:
        value = self.incoming.get("active_research")
        if value is None:
            return None
        if not isinstance(value, Mapping):
            self.repaired.append("active_research")
            return None
        
        model_id = value.get("model_id")
        category = value.get("category")
        required = (value.get("duration"), value.get("compute_required"), value.get("progress", 0.0))
        if (not isinstance(model_id, str) or not model_id
                or category not in CATEGORY_NAMES
                or not all(_is_number(v) for v in required)):
            self.repaired.append("active_research")
            return None
        
        def optional_number(key: str) -> float:
            number = value.get(key, 0.0)
            return float(number) if _is_number(number) else 0.0
        
        def optional_text(key: str, default: str) -> str:
            text = value.get(key)
            return text if isinstance(text, str) else default
        
        return ActiveResearch(
            category=category,
            model_id=model_id,
            duration=float(value["duration"]),
            compute_required=float(value["compute_required"]),
            progress=float(value.get("progress", 0.0)),
            name=optional_text("name", model_id),
            description=optional_text("description", ""),
            revenue_boost=optional_number("revenue_boost"),
            research_boost=optional_number("research_boost"),
            efficiency_boost=optional_number("efficiency_boost"),
            energy_cost=optional_number("energy_cost"),
        )


def sanitize_state(
    candidate: Any,
    config: CompanyConfig = COMPANY,
    ledger: LedgerConfig = LEDGER,
) -> CompanyState:
    """
    Build a well-formed state from arbitrary (possibly corrupt) plain data.
    
    Missing fields take defaults, wrongly typed fields are replaced, set
    fields are rebuilt without duplicates, history is re-aligned and capped,
    and news is capped. Never raises; sanitizing twice equals sanitizing once.
    """
    if isinstance(candidate, CompanyState):
        candidate = serialize_state(candidate)
    if not isinstance(candidate, Mapping):
        if candidate is not None:
            logger.warning(f"Discarding unreadable state of type {type(candidate).__name__}")
        return create_default_state(config)
    
    reader = _Sanitizer(candidate)
    compute_capacity = reader.number("compute_capacity", config.compute_capacity)
    compute_used = reader.number("compute_used", 0.0, minimum=0.0)
    
    state = CompanyState(
        time=reader.number("time", 0.0, minimum=0.0),
        cash=reader.number("cash", config.starting_cash, minimum=0.0),
        funding=reader.number("funding", config.starting_funding, minimum=0.0),
        expenses_per_second=reader.number("expenses_per_second", config.expenses_per_second),
        revenue_per_second=reader.number("revenue_per_second", config.revenue_per_second),
        compute_capacity=compute_capacity,
        compute_used=max(0.0, min(compute_used, compute_capacity)),
        energy_usage=reader.number("energy_usage", config.energy_usage, minimum=0.0),
        research_speed=reader.number("research_speed", config.research_speed),
        ai_power=reader.number("ai_power", 0.0, minimum=0.0),
        unlocked_models=reader.unlocked_models(),
        completed_models=reader.completed_models(),
        purchased_upgrades=reader.id_set("purchased_upgrades"),
        partnerships=reader.id_set("partnerships"),
        funding_claimed=reader.id_set("funding_claimed"),
        active_research=reader.active_research(),
        history=reader.history(ledger.history_limit),
        news=reader.news(list(config.seed_news), ledger.news_limit),
    )
    
    if reader.repaired:
        logger.warning(f"Sanitized state: repaired {', '.join(reader.repaired)}")
    return state

"""
AI Company Simulation — Core Module
State model, catalog registry, transactions, and tick engine.
"""

from .catalog import (
    Catalog,
    CATALOG,
    Effects,
    ModelSpec,
    UpgradeSpec,
    FundingRound,
)
from .state import (
    ActiveResearch,
    History,
    CompanyState,
    create_default_state,
    sanitize_state,
    serialize_state,
)
from .ledger import push_news, record_history, year_label
from .transactions import (
    ResearchResult,
    can_afford,
    purchase_upgrade,
    unlock_funding,
    start_research,
)
from .engine import advance_time, update_research, update_economy
from .views import (
    ResearchStatus,
    format_number,
    format_currency,
    describe_model,
    get_infrastructure,
    get_available_funding,
    get_active_model,
    research_status,
)
from .metrics import SessionMetrics
from .simulation import Simulation

__all__ = [
    # Catalog
    "Catalog",
    "CATALOG",
    "Effects",
    "ModelSpec",
    "UpgradeSpec",
    "FundingRound",
    
    # State
    "ActiveResearch",
    "History",
    "CompanyState",
    "create_default_state",
    "sanitize_state",
    "serialize_state",
    
    # Ledger
    "push_news",
    "record_history",
    "year_label",
    
    # Transactions
    "ResearchResult",
    "can_afford",
    "purchase_upgrade",
    "unlock_funding",
    "start_research",
    
    # Tick engine
    "advance_time",
    "update_research",
    "update_economy",
    
    # Views
    "ResearchStatus",
    "format_number",
    "format_currency",
    "describe_model",
    "get_infrastructure",
    "get_available_funding",
    "get_active_model",
    "research_status",
    
    # Driver
    "SessionMetrics",
    "Simulation",
]

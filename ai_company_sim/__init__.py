"""
AI Company Simulation
Idle simulation core for a fictional AI lab: research, upgrades, and funding
driven by a continuous clock.
"""

__version__ = "1.0.0"

from .config import (
    COMPANY,
    LEDGER,
    CLOCK,
    CompanyConfig,
    LedgerConfig,
    ClockConfig,
    Category,
    UpgradeType,
)

from .core import (
    Catalog,
    CATALOG,
    CompanyState,
    ActiveResearch,
    ResearchResult,
    Simulation,
    create_default_state,
    sanitize_state,
    serialize_state,
    purchase_upgrade,
    unlock_funding,
    start_research,
    advance_time,
)

__all__ = [
    # Version info
    "__version__",
    
    # Config
    "COMPANY",
    "LEDGER",
    "CLOCK",
    "CompanyConfig",
    "LedgerConfig",
    "ClockConfig",
    "Category",
    "UpgradeType",
    
    # Core
    "Catalog",
    "CATALOG",
    "CompanyState",
    "ActiveResearch",
    "ResearchResult",
    "Simulation",
    "create_default_state",
    "sanitize_state",
    "serialize_state",
    "purchase_upgrade",
    "unlock_funding",
    "start_research",
    "advance_time",
]

"""
AI Company Simulation — Configuration
Starting economy, ledger limits, clock limits, and catalog enumerations.
"""

from dataclasses import dataclass, field
from typing import Tuple
from enum import Enum


class Category(Enum):
    """Model families, each with its own sequential research frontier."""
    LANGUAGE = "language"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    WORLD = "world"


class UpgradeType(Enum):
    """Upgrade groups offered to the player."""
    COMPUTE = "compute"
    RESEARCH = "research"
    REVENUE = "revenue"
    PARTNERSHIPS = "partnerships"


CATEGORY_NAMES: Tuple[str, ...] = tuple(c.value for c in Category)


@dataclass
class CompanyConfig:
    """Starting position of a freshly founded company."""
    
    # Capital
    starting_cash: float = 500000.0
    starting_funding: float = 500000.0
    
    # Flows (per simulated second)
    expenses_per_second: float = 250.0
    revenue_per_second: float = 800.0
    
    # Infrastructure
    compute_capacity: float = 500.0
    energy_usage: float = 40.0  # MW, approximate
    research_speed: float = 1.0
    
    seed_news: Tuple[str, ...] = field(default_factory=lambda: (
        "Founders secure seed capital and repurpose a warehouse into a compute lab.",
        "Talent joins from academia, ready to train GPT-1.",
    ))


@dataclass
class LedgerConfig:
    """Bounded history and news log parameters."""
    history_limit: int = 240
    news_limit: int = 40
    
    # Sixty simulated seconds = one in-game year
    base_year: int = 2024
    seconds_per_year: float = 60.0
    
    def year_at(self, time: float) -> int:
        """In-game year for an elapsed simulation time."""
        return self.base_year + int(time // self.seconds_per_year)


@dataclass
class ClockConfig:
    """Limits applied by the driving loop."""
    # Largest step accepted per tick, so a stalled driver cannot jump ahead
    max_tick_seconds: float = 1.0
    
    # Cadence used by Simulation.run when no step is given
    default_step_seconds: float = 1.0


# Default configurations
COMPANY = CompanyConfig()
LEDGER = LedgerConfig()
CLOCK = ClockConfig()

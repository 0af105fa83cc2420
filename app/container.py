"""Dependency Injection container - services wired once, shared by callers."""

from app.repositories import DutchPoliticalRepository
from app.services.coalitions import (
    CoalitionEnumerator,
    HistoricalValidator,
    PartyCompatibilityScorer,
    RedLineValidator,
    ScenarioCatalog,
)
from app.services.elections import SeatAllocator
from settings.logging import setup_logging


class Container:
    """Application DI container - holds all singleton instances.

    Services are stateless; nothing computed from an election is kept here.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Safe to call more than once."""
        if self._initialized:
            return

        setup_logging()

        # Repositories (singletons)
        self.repo = DutchPoliticalRepository()

        # Services (with injected collaborators)
        self.allocator = SeatAllocator()
        self.scorer = PartyCompatibilityScorer(partnerships=self.repo.get_partnerships())
        self.red_lines = RedLineValidator()
        self.enumerator = CoalitionEnumerator(scorer=self.scorer, red_lines=self.red_lines)
        self.scenarios = ScenarioCatalog(
            registry=self.repo.get_registry(),
            scorer=self.scorer,
            red_lines=self.red_lines,
        )
        self.history = HistoricalValidator()

        self._initialized = True


# Global container instance
container = Container()

"""Abstract base class for all plan checks.

Every check in the validation engine implements this interface. Checks are:
- Self-contained: each verifies one family of invariants
- Composable: multiple checks run in sequence via the registry
- Non-fatal: a check reports violations instead of raising
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from floorplan.models.context import ValidationContext
from floorplan.models.violations import Violation, ViolationKind, EntityKind


class PlanCheck(ABC):
    """
    Base class for all plan checks.

    Subclasses implement `applies()` and `run()`.
    The validator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `run()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of checks that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this check (e.g., 'wall.length')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Wall Length')."""
        ...

    @abstractmethod
    def applies(self, context: ValidationContext) -> bool:
        """Return True if this check should run for the given context."""
        ...

    @abstractmethod
    def run(self, context: ValidationContext) -> list[Violation]:
        """
        Check the plan in the given context.

        The context provides the plan, config, and the analyzer's indexes.
        Checks may record resolved geometry on the context as a side result.
        """
        ...

    def violation(
        self, kind: ViolationKind, entity: EntityKind, entity_id: str, message: str,
    ) -> Violation:
        return Violation(
            kind=kind, entity=entity, entity_id=entity_id,
            message=message, check_id=self.get_id(),
        )

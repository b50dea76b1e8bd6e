"""Check registry — stores plan checks and selects the ones to run."""

from __future__ import annotations

from floorplan.errors import ConfigError
from floorplan.models import ValidationConfig
from floorplan.models.context import ValidationContext
from floorplan.rules.base import PlanCheck


class CheckRegistry:
    """
    Central registry for all plan checks.

    Selection honours `ValidationConfig`: enabling a check also enables
    everything it depends on, and disabling a check that a selected check
    depends on is a ConfigError. Selected checks run by priority, never
    before their dependencies.
    """

    def __init__(self) -> None:
        self._checks: dict[str, PlanCheck] = {}

    def register(self, check: PlanCheck) -> None:
        self._checks[check.get_id()] = check

    def unregister(self, check_id: str) -> None:
        self._checks.pop(check_id, None)

    def get_check(self, check_id: str) -> PlanCheck | None:
        return self._checks.get(check_id)

    def list_checks(self) -> list[PlanCheck]:
        return list(self._checks.values())

    def select(self, config: ValidationConfig) -> list[PlanCheck]:
        """Checks to run under `config`, in execution order."""
        self._require_known(config.enabled_checks + config.disabled_checks, "Unknown check id(s)")

        roots = config.enabled_checks or list(self._checks)
        wanted = [cid for cid in self._with_dependencies(roots) if cid not in config.disabled_checks]

        conflicts = [
            f"{cid} requires {dep}"
            for cid in wanted
            for dep in self._checks[cid].dependencies
            if dep in config.disabled_checks
        ]
        if conflicts:
            raise ConfigError(
                f"Disabled check(s) still required: {'; '.join(conflicts)}",
                {"conflicts": ";".join(conflicts)},
            )
        return self._execution_order([self._checks[cid] for cid in wanted])

    def get_applicable_checks(self, context: ValidationContext) -> list[PlanCheck]:
        """Selected checks whose `applies()` accepts the context."""
        return [c for c in self.select(context.config) if c.applies(context)]

    def _require_known(self, check_ids: list[str], what: str) -> None:
        unknown = [cid for cid in check_ids if cid not in self._checks]
        if unknown:
            raise ConfigError(f"{what}: {', '.join(unknown)}", {"unknown": ",".join(unknown)})

    def _with_dependencies(self, roots: list[str]) -> list[str]:
        """`roots` plus every check they transitively depend on."""
        found: list[str] = []
        pending = list(roots)
        while pending:
            cid = pending.pop()
            if cid in found:
                continue
            found.append(cid)
            deps = self._checks[cid].dependencies
            self._require_known(deps, f"Check {cid} depends on unregistered check(s)")
            pending.extend(deps)
        return found

    def _execution_order(self, checks: list[PlanCheck]) -> list[PlanCheck]:
        # Repeatedly take the lowest-priority check whose dependencies have run
        remaining = sorted(checks, key=lambda c: c.priority)
        done: set[str] = set()
        ordered: list[PlanCheck] = []
        while remaining:
            ready = next(
                (c for c in remaining if all(d in done for d in c.dependencies)),
                None,
            )
            if ready is None:
                cycle = ", ".join(c.get_id() for c in remaining)
                raise ConfigError(f"Circular check dependencies among: {cycle}", {"checks": cycle})
            remaining.remove(ready)
            done.add(ready.get_id())
            ordered.append(ready)
        return ordered


def create_default_registry() -> CheckRegistry:
    """Create a registry with all standard plan checks."""
    from floorplan.rules.wall.length import WallLengthCheck
    from floorplan.rules.opening.bounds import OpeningBoundsCheck
    from floorplan.rules.opening.overlap import OpeningOverlapCheck
    from floorplan.rules.room.loop import RoomLoopCheck

    registry = CheckRegistry()
    for check in (WallLengthCheck(), OpeningBoundsCheck(), OpeningOverlapCheck(), RoomLoopCheck()):
        registry.register(check)
    return registry

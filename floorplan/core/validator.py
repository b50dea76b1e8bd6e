"""Validation engine — runs every check and aggregates violations."""

from __future__ import annotations
import logging

from floorplan.errors import ValidationError
from floorplan.models import Plan, ValidationConfig, ValidationContext
from floorplan.core.registry import CheckRegistry, create_default_registry
from floorplan.core.analyzer import PlanAnalyzer

logger = logging.getLogger(__name__)


class PlanValidator:
    """
    Stateless plan validator.

    Takes a plan + config, runs analysis, executes applicable checks,
    and returns the context holding violations and resolved polygons.
    """

    def __init__(self, registry: CheckRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = PlanAnalyzer()

    def check(self, plan: Plan, config: ValidationConfig | None = None) -> ValidationContext:
        if config is None:
            config = ValidationConfig()

        # Build context
        context = ValidationContext(plan=plan, config=config)

        # Analysis phase — index walls, group openings
        self.analyzer.analyze(context)

        # Check phase — every applicable check runs, none stops the pass
        checks = self.registry.get_applicable_checks(context)
        for check in checks:
            violations = check.run(context)
            logger.debug("Check %s found %d violation(s)", check.get_id(), len(violations))
            context.add_violations(violations)

        return context

    def resolve_and_validate(self, plan: Plan, config: ValidationConfig | None = None) -> Plan:
        context = self.check(plan, config)
        if context.violations:
            logger.warning("Plan failed validation with %d violation(s)", len(context.violations))
            raise ValidationError(context.violations)

        logger.info(
            "Plan validated: %d walls, %d openings, %d rooms",
            len(plan.walls), len(plan.openings), len(plan.rooms),
        )
        return context.resolved_plan()


def resolve_and_validate(
    plan: Plan,
    config: ValidationConfig | None = None,
    registry: CheckRegistry | None = None,
) -> Plan:
    """
    Validate a plan and resolve every room polygon.

    Returns a copy of `plan` whose rooms all carry their resolved polygon;
    the input plan is left untouched. Raises ValidationError listing every
    violation found.
    """
    return PlanValidator(registry).resolve_and_validate(plan, config)

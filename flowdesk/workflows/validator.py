"""
GraphValidator — structural soundness checker for Workflow graphs.

All 5 checks are non-destructive reads of the workflow graph and always run
in the same order, so the error list is deterministic for a given input.
"""

from __future__ import annotations

import logging

from flowdesk.exceptions import WorkflowValidationError
from flowdesk.types import BranchHandle, NodeType, ValidationReport, Workflow

from .graph import branch_edge, find_first, is_isolated, reachable_from

logger = logging.getLogger(__name__)

_TERMINAL_TYPES = (NodeType.START, NodeType.END)


class GraphValidator:
    """
    Validates the structural soundness of a Workflow.

    Usage::

        validator = GraphValidator()
        report = validator.validate(workflow)
        if not report.valid:
            show(report.errors)

    All checks are run even if earlier ones fail, so callers get the full
    error list in one shot.  A malformed graph is reported, never raised.
    """

    def validate(self, workflow: Workflow) -> ValidationReport:
        """
        Run all structural checks on a Workflow.

        Args:
            workflow: The workflow to validate.  Not modified.

        Returns:
            ValidationReport; ``valid`` is True iff ``errors`` is empty.
        """
        errors: list[str] = []
        nodes = workflow.nodes
        edges = workflow.edges

        # ── Check 1: Start node ───────────────────────────────────────────────
        # Presence only; duplicates are allowed and the first one wins below.
        start = find_first(nodes, NodeType.START)
        if start is None:
            errors.append("Workflow must have a start node")

        # ── Check 2: End node ─────────────────────────────────────────────────
        end = find_first(nodes, NodeType.END)
        if end is None:
            errors.append("Workflow must have an end node")

        # ── Check 3: Isolated nodes ───────────────────────────────────────────
        # Start/end are exempt; one edge in either direction is enough.
        for node in nodes:
            if node.type in _TERMINAL_TYPES:
                continue
            if is_isolated(node.id, edges):
                errors.append(
                    f'Node "{node.display_name}" ({node.id}) is isolated with no connections'
                )

        # ── Check 4: Start → end reachability ─────────────────────────────────
        if start is not None and end is not None:
            if end.id not in reachable_from(start.id, edges):
                errors.append("No valid path from start to end node")

        # ── Check 5: Decision branches ────────────────────────────────────────
        for node in nodes:
            if node.type != NodeType.DECISION:
                continue
            if branch_edge(node.id, edges, BranchHandle.TRUE) is None:
                errors.append(
                    f'Decision node "{node.display_name}" ({node.id}) is missing a true path'
                )
            if branch_edge(node.id, edges, BranchHandle.FALSE) is None:
                errors.append(
                    f'Decision node "{node.display_name}" ({node.id}) is missing a false path'
                )

        logger.debug(
            "Validated workflow %s: %d node(s), %d edge(s), %d error(s)",
            workflow.id, len(nodes), len(edges), len(errors),
        )
        if errors:
            logger.info("Workflow %s failed validation with %d error(s)", workflow.id, len(errors))

        return ValidationReport(errors=errors)

    def validate_or_raise(self, workflow: Workflow) -> ValidationReport:
        """
        Validate and refuse unsound graphs; call before saving or activating.

        Raises:
            WorkflowValidationError: if the report has any errors.
        """
        report = self.validate(workflow)
        if not report.valid:
            raise WorkflowValidationError(
                f"Workflow '{workflow.name or workflow.id}' is invalid",
                violations=report.errors,
            )
        return report


_default_validator = GraphValidator()


def validate(workflow: Workflow) -> ValidationReport:
    """Validate workflow with a shared GraphValidator (it holds no state)."""
    return _default_validator.validate(workflow)

"""flowdesk.workflows — Workflow graph helpers and structural validation."""

from .validator import GraphValidator, validate

__all__ = ["GraphValidator", "validate"]

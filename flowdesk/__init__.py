"""FLOWDESK — workflow graph validation and rule test-data synthesis.

Usage:
    from flowdesk import Workflow, WorkflowNode, validate, synthesize_test_data

    report = validate(workflow)
    if not report.valid:
        print(report.errors)

    payload = synthesize_test_data(rule.conditions)
"""

from flowdesk.types import (
    NodeType, BranchHandle, WorkflowNode, WorkflowEdge, Workflow, ValidationReport,
    Condition, RuleAction, Rule, ExecutedAction, RuleEvaluationResult,
    LeafValue, SynthesizedPayload,
)
from flowdesk.exceptions import (
    FlowdeskError, ConfigError, WorkflowError, WorkflowIntegrityError,
    WorkflowValidationError, RuleError, RuleEvaluationError,
)
from flowdesk.workflows import GraphValidator, validate
from flowdesk.rules.synthesizer import coerce_value, synthesize_test_data
from flowdesk.version import __version__

__all__ = [
    "NodeType", "BranchHandle", "WorkflowNode", "WorkflowEdge", "Workflow", "ValidationReport",
    "Condition", "RuleAction", "Rule", "ExecutedAction", "RuleEvaluationResult",
    "LeafValue", "SynthesizedPayload",
    "FlowdeskError", "ConfigError", "WorkflowError", "WorkflowIntegrityError",
    "WorkflowValidationError", "RuleError", "RuleEvaluationError",
    "GraphValidator", "validate", "coerce_value", "synthesize_test_data",
    "__version__",
]

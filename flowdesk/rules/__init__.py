"""flowdesk.rules — Test-data synthesis and trial evaluation for rules."""

from .client import RuleEvaluationClient
from .synthesizer import PayloadBuilder, build_evaluation_request, coerce_value, synthesize_test_data

__all__ = [
    "RuleEvaluationClient",
    "PayloadBuilder",
    "build_evaluation_request",
    "coerce_value",
    "synthesize_test_data",
]

"""Typed exception hierarchy. Every error FLOWDESK can raise."""


class FlowdeskError(Exception):
    """Base exception for all FLOWDESK errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class ConfigError(FlowdeskError):
    """A workflow or rule file could not be read or does not match its schema."""
    def __init__(self, message: str, path: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


# ── Workflow Exceptions ─────────────────────────────────────────────────────


class WorkflowError(FlowdeskError):
    """Base exception for all workflow-related errors."""
    pass


class WorkflowIntegrityError(WorkflowError):
    """Graph breaks its referential contract (dangling edge, duplicate node id).

    This is a defect of whoever built the Workflow, not a validation finding.
    """
    def __init__(self, message: str, violations: list = None, **kwargs):
        super().__init__(message, **kwargs)
        self.violations = violations or []


class WorkflowValidationError(WorkflowError):
    """Workflow definition is structurally unsound (no start node, unreachable end, etc.)."""
    def __init__(self, message: str, violations: list = None, **kwargs):
        super().__init__(message, **kwargs)
        self.violations = violations or []


# ── Rule Exceptions ─────────────────────────────────────────────────────────


class RuleError(FlowdeskError):
    """Base exception for all rule-related errors."""
    pass


class RuleEvaluationError(RuleError):
    """The rule evaluation endpoint failed or returned a non-2xx response."""
    def __init__(self, status_code: int, detail: str, **kwargs):
        super().__init__(f"HTTP {status_code}: {detail}" if status_code else detail, **kwargs)
        self.status_code = status_code
        self.detail = detail

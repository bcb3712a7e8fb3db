"""All shared types, enums, and type aliases. Everything imports from here."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, computed_field, field_validator, model_validator
import uuid


# ── Enums ──────────────────────────────────────────────────────────────

class NodeType(str, Enum):
    START = "start"
    END = "end"
    DECISION = "decision"   # two outgoing branches, handles "true" / "false"
    ACTION = "action"       # generic step
    SERVICE = "service"
    FORK = "fork"
    CONDITION = "condition"
    JOIN = "join"
    HUMAN = "human"
    SYSTEM = "system"
    AI = "ai"
    DB = "db"
    MAIL = "mail"
    REST = "rest"
    AGENT = "agent"
    CUSTOM = "custom"

class BranchHandle(str, Enum):
    TRUE = "true"
    FALSE = "false"


# ── Workflow graph ─────────────────────────────────────────────────────

class WorkflowNode(BaseModel):
    """A single node on the workflow canvas."""
    id: str                             # unique within the graph
    type: NodeType
    label: str = ""                     # display name, only used in messages

    @property
    def display_name(self) -> str:
        return self.label or self.id

class WorkflowEdge(BaseModel):
    """Directed connection between two nodes of the same graph."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    source: str
    target: str
    source_handle: Optional[str] = None  # "true" / "false" on decision nodes
    target_handle: Optional[str] = None
    label: Optional[str] = None

class Workflow(BaseModel):
    """Node/edge definition as produced by the workflow designer.

    Referential integrity (unique node ids, edges pointing at existing nodes,
    one edge per decision branch) is checked on construction and raises
    WorkflowIntegrityError.  Structural soundness is the validator's job.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    nodes: list[WorkflowNode] = Field(default_factory=list)
    edges: list[WorkflowEdge] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_graph_integrity(self) -> "Workflow":
        from flowdesk.workflows.graph import check_integrity
        check_integrity(self.nodes, self.edges)
        return self

class ValidationReport(BaseModel):
    """Outcome of a validation run. ``valid`` is derived from ``errors``."""
    errors: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors


# ── Rules ──────────────────────────────────────────────────────────────

# Leaf values of a synthesized payload: Number, Boolean or String.
LeafValue = Union[bool, int, float, str]
SynthesizedPayload = dict[str, Any]

class Condition(BaseModel):
    """A flat rule condition: dotted field path, operator, literal as text."""
    field: str = ""                     # "user.profile.age"; blank is a no-op
    operator: str = "=="                # opaque here, interpreted server-side
    value: str = ""

    @field_validator("field", mode="before")
    @classmethod
    def coerce_field(cls, v):
        return "" if v is None else v

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value_text(cls, v):
        # YAML/JSON loaders hand over typed scalars; keep the literal as text
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        if isinstance(v, (str, list, dict)):
            return v
        return str(v)

class RuleAction(BaseModel):
    """Action applied by the evaluator when the rule's conditions hold."""
    type: str                           # "setValue", "notify", ...
    target: str = ""
    value: Any = None

class Rule(BaseModel):
    """Rule definition as edited in the dashboard."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    description: str = ""
    rule_type: str = "business"
    priority: int = 1
    active: bool = True
    conditions: list[Condition] = Field(default_factory=list)
    actions: list[RuleAction] = Field(default_factory=list)

class ExecutedAction(BaseModel):
    """One action the evaluator reports as applied."""
    action_id: str = ""
    success: bool = True
    result: Any = None
    error: Optional[str] = None

class RuleEvaluationResult(BaseModel):
    """Verdict returned by the external rule evaluator."""
    result: bool
    executed_actions: list[ExecutedAction] = Field(default_factory=list)
    raw: dict[str, Any] = Field(default_factory=dict)  # full response body

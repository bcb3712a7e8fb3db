"""Pydantic models for workflow / rule file validation.

These mirror flowdesk/types.py structures but accept the designer's export
shape (camelCase keys, node labels nested under ``data``) and normalise it.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from flowdesk.types import NodeType


class NodeFile(BaseModel):
    """Validated schema for a node entry in a workflow file."""

    id: str
    type: NodeType
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def lift_data_label(cls, v):
        # canvas exports keep the label at data.label
        if isinstance(v, dict) and not v.get("label"):
            data = v.get("data")
            if isinstance(data, dict) and data.get("label"):
                v = {**v, "label": data["label"]}
        return v

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v):
        if isinstance(v, str):
            return NodeType(v.lower())
        return v


class EdgeFile(BaseModel):
    """Validated schema for an edge entry in a workflow file."""

    model_config = {"populate_by_name": True}

    id: Optional[str] = None
    source: str
    target: str
    source_handle: Optional[str] = Field(default=None, alias="sourceHandle")
    target_handle: Optional[str] = Field(default=None, alias="targetHandle")
    label: Optional[str] = None


class WorkflowFile(BaseModel):
    """Root schema for a workflow definition file."""

    id: Optional[str] = None
    name: str = ""
    nodes: list[NodeFile] = Field(default_factory=list)
    edges: list[EdgeFile] = Field(default_factory=list)


class ConditionFile(BaseModel):
    """Validated schema for a rule condition entry."""

    field: Optional[str] = ""
    operator: str = "=="
    value: Any = ""


class ActionFile(BaseModel):
    """Validated schema for a rule action entry."""

    type: str
    target: str = ""
    value: Any = None


class RuleFile(BaseModel):
    """Root schema for a rule definition file."""

    model_config = {"populate_by_name": True}

    id: Optional[str] = None
    name: str
    description: str = ""
    rule_type: str = Field(default="business", alias="ruleType")
    priority: int = 1
    active: bool = True
    conditions: list[ConditionFile] = Field(default_factory=list)
    actions: list[ActionFile] = Field(default_factory=list)

"""Load and validate workflow / rule files into Python objects.

Accepted formats, chosen by extension:
  - .json
  - .yaml / .yml

Both are parsed with ``yaml.safe_load`` (JSON is a YAML subset).
"""

import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from flowdesk.config.schema import RuleFile, WorkflowFile
from flowdesk.exceptions import ConfigError
from flowdesk.types import Rule, Workflow, WorkflowEdge, WorkflowNode

logger = logging.getLogger(__name__)

_SUPPORTED_SUFFIXES = {".json", ".yaml", ".yml"}


def _read_mapping(path: Union[str, Path]) -> dict[str, Any]:
    """Read a JSON/YAML file whose top level must be a mapping."""
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"File not found: {p}", path=str(p))
    if p.suffix.lower() not in _SUPPORTED_SUFFIXES:
        raise ConfigError(
            f"Unsupported file type '{p.suffix}' (expected .json, .yaml or .yml)",
            path=str(p),
        )
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {p}: {exc}", path=str(p)) from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{p}: top level must be a mapping", path=str(p))
    return raw


def load_workflow_file(path: Union[str, Path]) -> Workflow:
    """Load a workflow definition file → Workflow.

    Args:
        path: Path to a .json / .yaml / .yml designer export.

    Returns:
        A Workflow.  Referential integrity is checked on construction and
        raises WorkflowIntegrityError.

    Raises:
        ConfigError: if the file is missing, unparsable or off-schema.
    """
    raw = _read_mapping(path)
    try:
        parsed = WorkflowFile.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid workflow file {path}: {exc}", path=str(path)) from exc

    nodes = [WorkflowNode(id=n.id, type=n.type, label=n.label) for n in parsed.nodes]
    edges = []
    for e in parsed.edges:
        fields = dict(
            source=e.source,
            target=e.target,
            source_handle=e.source_handle,
            target_handle=e.target_handle,
            label=e.label,
        )
        if e.id:
            fields["id"] = e.id
        edges.append(WorkflowEdge(**fields))

    kwargs: dict[str, Any] = {"name": parsed.name, "nodes": nodes, "edges": edges}
    if parsed.id:
        kwargs["id"] = parsed.id
    workflow = Workflow(**kwargs)
    logger.debug("Loaded workflow %s from %s", workflow.id, path)
    return workflow


def load_rule_file(path: Union[str, Path]) -> Rule:
    """Load a rule definition file → Rule.

    Raises:
        ConfigError: if the file is missing, unparsable or off-schema.
    """
    raw = _read_mapping(path)
    try:
        parsed = RuleFile.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid rule file {path}: {exc}", path=str(path)) from exc

    kwargs: dict[str, Any] = dict(
        name=parsed.name,
        description=parsed.description,
        rule_type=parsed.rule_type,
        priority=parsed.priority,
        active=parsed.active,
        conditions=[c.model_dump() for c in parsed.conditions],
        actions=[a.model_dump() for a in parsed.actions],
    )
    if parsed.id:
        kwargs["id"] = parsed.id
    try:
        rule = Rule(**kwargs)
    except ValidationError as exc:
        raise ConfigError(f"Invalid rule file {path}: {exc}", path=str(path)) from exc
    logger.debug("Loaded rule %s from %s", rule.id, path)
    return rule

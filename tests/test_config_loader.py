"""Tests for FlowdeskConfig and the workflow / rule file loaders."""

import json

import pytest

from flowdesk.config import FlowdeskConfig, load_rule_file, load_workflow_file
from flowdesk.exceptions import ConfigError, WorkflowIntegrityError
from flowdesk.types import NodeType

DESIGNER_EXPORT = {
    "id": "wf-1",
    "name": "Onboarding",
    "nodes": [
        {"id": "n1", "type": "start", "position": {"x": 0, "y": 0}, "data": {"label": "Begin"}},
        {"id": "n2", "type": "decision", "data": {"label": "Has account?"}},
        {"id": "n3", "type": "mail", "label": "Welcome mail"},
        {"id": "n4", "type": "END", "data": {"label": "Done"}},
    ],
    "edges": [
        {"id": "e1", "source": "n1", "target": "n2"},
        {"id": "e2", "source": "n2", "target": "n3", "sourceHandle": "false"},
        {"id": "e3", "source": "n2", "target": "n4", "source_handle": "true"},
        {"source": "n3", "target": "n4"},
    ],
}

RULE_YAML = """\
id: rule-7
name: Adult check
ruleType: validation
conditions:
  - field: user.age
    operator: ">="
    value: 18
  - field: user.verified
    operator: "=="
    value: true
  - field: user.country
    value: NL
  - field:
    value: skipped
actions:
  - type: setValue
    target: user.adult
    value: true
"""


def test_config_env_prefix(monkeypatch):
    monkeypatch.setenv("FLOWDESK_RULES_API_BASE_URL", "http://env.example")
    monkeypatch.setenv("FLOWDESK_RULES_API_TIMEOUT", "2.5")
    cfg = FlowdeskConfig()
    assert cfg.rules_api_base_url == "http://env.example"
    assert cfg.rules_api_timeout == 2.5


def test_load_workflow_json_designer_shape(tmp_path):
    path = tmp_path / "wf.json"
    path.write_text(json.dumps(DESIGNER_EXPORT))
    wf = load_workflow_file(path)

    assert wf.id == "wf-1"
    assert [n.label for n in wf.nodes] == ["Begin", "Has account?", "Welcome mail", "Done"]
    assert wf.nodes[3].type == NodeType.END
    assert wf.edges[1].source_handle == "false"
    assert wf.edges[2].source_handle == "true"
    assert wf.edges[3].id  # generated


def test_load_workflow_yaml(tmp_path):
    path = tmp_path / "wf.yaml"
    path.write_text(
        "name: Tiny\n"
        "nodes:\n"
        "  - {id: s, type: start}\n"
        "  - {id: e, type: end}\n"
        "edges:\n"
        "  - {source: s, target: e}\n"
    )
    wf = load_workflow_file(path)
    assert wf.name == "Tiny"
    assert len(wf.edges) == 1


def test_load_workflow_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_workflow_file(tmp_path / "nope.json")


def test_load_workflow_bad_suffix(tmp_path):
    path = tmp_path / "wf.txt"
    path.write_text("{}")
    with pytest.raises(ConfigError, match="Unsupported"):
        load_workflow_file(path)


def test_load_workflow_unknown_node_type(tmp_path):
    path = tmp_path / "wf.json"
    path.write_text(json.dumps({"nodes": [{"id": "x", "type": "teleport"}]}))
    with pytest.raises(ConfigError):
        load_workflow_file(path)


def test_load_workflow_top_level_list(tmp_path):
    path = tmp_path / "wf.json"
    path.write_text("[]")
    with pytest.raises(ConfigError, match="mapping"):
        load_workflow_file(path)


def test_load_workflow_dangling_edge(tmp_path):
    path = tmp_path / "wf.json"
    path.write_text(json.dumps({
        "nodes": [{"id": "s", "type": "start"}],
        "edges": [{"source": "s", "target": "ghost"}],
    }))
    with pytest.raises(WorkflowIntegrityError):
        load_workflow_file(path)


def test_load_rule_yaml(tmp_path):
    path = tmp_path / "rule.yaml"
    path.write_text(RULE_YAML)
    rule = load_rule_file(path)

    assert rule.id == "rule-7"
    assert rule.rule_type == "validation"
    assert [c.value for c in rule.conditions] == ["18", "true", "NL", "skipped"]
    assert rule.conditions[3].field == ""
    assert rule.actions[0].target == "user.adult"


def test_load_rule_requires_name(tmp_path):
    path = tmp_path / "rule.json"
    path.write_text(json.dumps({"conditions": []}))
    with pytest.raises(ConfigError):
        load_rule_file(path)


def test_bundled_examples_load_and_validate():
    from pathlib import Path

    from flowdesk.rules import synthesize_test_data
    from flowdesk.workflows import validate

    examples = Path(__file__).parent.parent / "examples"
    assert validate(load_workflow_file(examples / "approval_workflow.json")).valid

    rule = load_rule_file(examples / "vip_discount_rule.yaml")
    assert synthesize_test_data(rule.conditions) == {
        "customer": {"tier": "gold", "active": True},
        "order": {"total": 250},
    }


def test_load_rule_yaml_date_value_kept_as_text(tmp_path):
    path = tmp_path / "rule.yaml"
    path.write_text(
        "name: Renewal window\n"
        "conditions:\n"
        "  - field: contract.endDate\n"
        "    operator: \"<=\"\n"
        "    value: 2024-01-31\n"
    )
    rule = load_rule_file(path)
    assert rule.conditions[0].value == "2024-01-31"


def test_bad_env_value_does_not_block_import(monkeypatch):
    import importlib

    import flowdesk.config

    monkeypatch.setenv("FLOWDESK_RULES_API_TIMEOUT", "not-a-number")
    importlib.reload(flowdesk.config)
    from flowdesk.workflows import validate
    assert validate.__name__ == "validate"

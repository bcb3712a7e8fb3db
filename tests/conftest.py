"""Test fixtures: sample workflows, sample rules, test config.

All tests should use these fixtures for consistency.
"""

import pytest

from flowdesk.config import FlowdeskConfig
from flowdesk.types import Condition, NodeType, Rule, RuleAction, Workflow, WorkflowEdge, WorkflowNode


def node(node_id: str, node_type: str, label: str = "") -> WorkflowNode:
    return WorkflowNode(id=node_id, type=NodeType(node_type), label=label or node_id.title())


def edge(source: str, target: str, handle: str = None) -> WorkflowEdge:
    return WorkflowEdge(id=f"{source}->{target}", source=source, target=target, source_handle=handle)


@pytest.fixture
def config():
    """Test configuration with safe defaults."""
    return FlowdeskConfig(
        debug=True,
        rules_api_base_url="http://rules.test",
        rules_api_token="test-token-123456",
        rules_api_timeout=5.0,
    )


@pytest.fixture
def linear_workflow():
    """start → action → end."""
    return Workflow(
        id="wf-linear",
        name="Linear",
        nodes=[node("start", "start"), node("task", "action", "Send email"), node("end", "end")],
        edges=[edge("start", "task"), edge("task", "end")],
    )


@pytest.fixture
def decision_workflow():
    """start → decision ─true→ approve → end, ─false→ reject → end."""
    return Workflow(
        id="wf-decision",
        name="Approval",
        nodes=[
            node("start", "start"),
            node("check", "decision", "Amount > 100?"),
            node("approve", "human", "Approve"),
            node("reject", "mail", "Reject"),
            node("end", "end"),
        ],
        edges=[
            edge("start", "check"),
            edge("check", "approve", "true"),
            edge("check", "reject", "false"),
            edge("approve", "end"),
            edge("reject", "end"),
        ],
    )


@pytest.fixture
def cyclic_unreachable_workflow():
    """start → a ⇄ b, end never reached."""
    return Workflow(
        id="wf-cycle",
        nodes=[node("start", "start"), node("a", "action"), node("b", "action"), node("end", "end")],
        edges=[edge("start", "a"), edge("a", "b"), edge("b", "a")],
    )


@pytest.fixture
def sample_rule():
    """Rule with nested, numeric, boolean and blank conditions."""
    return Rule(
        id="rule-42",
        name="VIP discount",
        conditions=[
            Condition(field="user.age", operator=">", value="30"),
            Condition(field="user.name", operator="==", value="Bob"),
            Condition(field="user.vip", operator="==", value="true"),
            Condition(field="", operator="==", value="ignored"),
            Condition(field="order.total", operator=">=", value="99.5"),
        ],
        actions=[RuleAction(type="setValue", target="order.discount", value=10)],
    )

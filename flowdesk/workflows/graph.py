"""
Graph utilities for workflow traversal and referential-integrity checks.

All functions operate on WorkflowNode / WorkflowEdge lists and are pure
(no side effects, no I/O) so they can be called safely from the model layer,
the validator, and the CLI alike.
"""

from __future__ import annotations

from collections import deque
from typing import Optional

from flowdesk.exceptions import WorkflowIntegrityError
from flowdesk.types import BranchHandle, NodeType, WorkflowEdge, WorkflowNode


# ── Traversal helpers ─────────────────────────────────────────────────────────


def get_children(
    node_id: str, edges: list[WorkflowEdge]
) -> list[tuple[str, WorkflowEdge]]:
    """Return (target_id, edge) pairs for all outgoing edges of node_id."""
    return [(e.target, e) for e in edges if e.source == node_id]


def get_parents(
    node_id: str, edges: list[WorkflowEdge]
) -> list[tuple[str, WorkflowEdge]]:
    """Return (source_id, edge) pairs for all incoming edges of node_id."""
    return [(e.source, e) for e in edges if e.target == node_id]


def find_first(
    nodes: list[WorkflowNode], node_type: NodeType
) -> Optional[WorkflowNode]:
    """Return the first node of node_type in list order, or None."""
    for node in nodes:
        if node.type == node_type:
            return node
    return None


def is_isolated(node_id: str, edges: list[WorkflowEdge]) -> bool:
    """True when node_id is neither the source nor the target of any edge."""
    return not any(e.source == node_id or e.target == node_id for e in edges)


def reachable_from(start_id: str, edges: list[WorkflowEdge]) -> set[str]:
    """
    Return every node id reachable from start_id by following edges forward.

    BFS with a visited set, so cycles terminate.  start_id is always included.
    """
    adjacency: dict[str, list[str]] = {}
    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge.target)

    visited: set[str] = set()
    queue: deque[str] = deque([start_id])
    while queue:
        node = queue.popleft()
        if node in visited:
            continue
        visited.add(node)
        for child in adjacency.get(node, []):
            if child not in visited:
                queue.append(child)
    return visited


def branch_edge(
    node_id: str, edges: list[WorkflowEdge], handle: BranchHandle
) -> Optional[WorkflowEdge]:
    """Return the outgoing edge of node_id tagged with handle, if any."""
    for _, edge in get_children(node_id, edges):
        if edge.source_handle == handle.value:
            return edge
    return None


# ── Referential integrity ─────────────────────────────────────────────────────


def check_integrity(nodes: list[WorkflowNode], edges: list[WorkflowEdge]) -> None:
    """
    Verify the graph's own contract: unique node ids, edges that point at
    existing nodes, and at most one edge per decision branch.

    Raises:
        WorkflowIntegrityError: listing every violation found.
    """
    violations: list[str] = []

    seen: set[str] = set()
    for node in nodes:
        if node.id in seen:
            violations.append(f"Duplicate node id '{node.id}'.")
        seen.add(node.id)

    for edge in edges:
        if edge.source not in seen:
            violations.append(
                f"Edge '{edge.id}': source '{edge.source}' references a node that does not exist."
            )
        if edge.target not in seen:
            violations.append(
                f"Edge '{edge.id}': target '{edge.target}' references a node that does not exist."
            )

    for node in nodes:
        if node.type != NodeType.DECISION:
            continue
        for handle in BranchHandle:
            count = sum(
                1 for _, e in get_children(node.id, edges)
                if e.source_handle == handle.value
            )
            if count > 1:
                violations.append(
                    f"Decision node '{node.id}' has {count} outgoing '{handle.value}' edges."
                )

    if violations:
        raise WorkflowIntegrityError(
            f"Workflow graph violates referential integrity ({len(violations)} problem(s))",
            violations=violations,
        )

"""
Test-data synthesis for rule conditions.

Turns a flat list of dotted-path conditions into the nested object a rule
would be evaluated against, so a rule can be trial-run without hand-writing
JSON.  Pure and deterministic: same conditions in the same order, same payload.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Iterable

from flowdesk.types import Condition, LeafValue, SynthesizedPayload

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


# ── Value coercion ────────────────────────────────────────────────────────────


def coerce_value(text: str) -> LeafValue:
    """
    Infer a typed literal from its text form.

    Precedence:
      1. finite number  → int for integral literals ("42"), float otherwise ("4.2", "1e3")
      2. "true"/"false" → bool (case-sensitive)
      3. anything else  → the original string, unchanged

    Blank text is not a number and stays "".
    """
    stripped = text.strip()
    if _INT_RE.fullmatch(stripped):
        try:
            return int(stripped)
        except ValueError:
            pass  # past the int digit limit; the float path keeps it as text
    if _FLOAT_RE.fullmatch(stripped):
        number = float(stripped)
        if math.isfinite(number):
            return number
    if text == "true":
        return True
    if text == "false":
        return False
    return text


# ── Nested builder ────────────────────────────────────────────────────────────


class PayloadBuilder:
    """
    Builds a nested dict one dotted path at a time.

    Intermediate keys are looked up or created per segment.  A segment that
    already holds a scalar is replaced by a fresh dict, and a leaf key is
    always overwritten; later paths win.
    """

    def __init__(self) -> None:
        self._root: dict[str, Any] = {}

    @staticmethod
    def child(mapping: dict[str, Any], key: str) -> dict[str, Any]:
        """Return mapping[key] as a dict, replacing anything that is not one."""
        existing = mapping.get(key)
        if isinstance(existing, dict):
            return existing
        if existing is not None:
            logger.debug("Replacing scalar at %r with a nested object", key)
        created: dict[str, Any] = {}
        mapping[key] = created
        return created

    def set(self, path: str, value: LeafValue) -> None:
        """Assign value at the dotted path, creating parents as needed."""
        *parents, leaf = path.split(".")
        current = self._root
        for segment in parents:
            current = self.child(current, segment)
        current[leaf] = value

    def build(self) -> SynthesizedPayload:
        return self._root


# ── Public API ────────────────────────────────────────────────────────────────


def synthesize_test_data(conditions: Iterable[Condition]) -> SynthesizedPayload:
    """
    Build a nested test payload from rule conditions, in order.

    Conditions with a blank field are skipped.  Conditions sharing a path
    prefix share nested objects; the last condition on a leaf path wins.

    Example::

        synthesize_test_data([
            Condition(field="user.age", value="30"),
            Condition(field="user.name", value="Bob"),
        ])
        # {"user": {"age": 30, "name": "Bob"}}
    """
    builder = PayloadBuilder()
    for condition in conditions:
        if not condition.field:
            continue
        builder.set(condition.field, coerce_value(condition.value))
    return builder.build()


def build_evaluation_request(payload: SynthesizedPayload) -> dict[str, Any]:
    """Wrap a payload the way the rule evaluation endpoint expects it."""
    return {"data": payload}

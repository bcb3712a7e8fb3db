"""Async client for the external rule evaluation endpoint.

Usage:
    async with RuleEvaluationClient(base_url="http://localhost:8080") as client:
        result = await client.test_rule(rule)
        print(result.result, [a.action_id for a in result.executed_actions])

The evaluator decides the verdict; this client only ships the synthesized
payload and parses the reply.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from flowdesk.config import FlowdeskConfig
from flowdesk.exceptions import RuleEvaluationError
from flowdesk.types import ExecutedAction, Rule, RuleEvaluationResult, SynthesizedPayload

from .synthesizer import build_evaluation_request, synthesize_test_data

logger = logging.getLogger(__name__)


class RuleEvaluationClient:
    """Async HTTP client for ``POST /api/rules/{id}/evaluate``.

    Args:
        base_url:  API base URL; defaults to FLOWDESK_RULES_API_BASE_URL
        api_token: Optional bearer token
        timeout:   Request timeout in seconds
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[FlowdeskConfig] = None,
    ):
        cfg = config or FlowdeskConfig()
        self.base_url = (base_url or cfg.rules_api_base_url).rstrip("/")
        self._api_token = api_token if api_token is not None else cfg.rules_api_token
        self._timeout = timeout if timeout is not None else cfg.rules_api_timeout
        self._http: Optional[httpx.AsyncClient] = None

    # ── Lifecycle ──────────────────────────────────────────────────────────

    async def __aenter__(self) -> "RuleEvaluationClient":
        await self.connect()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    async def connect(self) -> None:
        """Open HTTP session."""
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self._timeout,
            headers=self._headers(),
        )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._http:
            await self._http.aclose()
            self._http = None

    def _headers(self) -> dict[str, str]:
        if self._api_token:
            return {"Authorization": f"Bearer {self._api_token}"}
        return {}

    # ── Evaluation ─────────────────────────────────────────────────────────

    async def evaluate(self, rule_id: str, payload: SynthesizedPayload) -> RuleEvaluationResult:
        """Submit payload for trial evaluation of rule_id.

        Raises:
            RuleEvaluationError: on transport failure or non-2xx response.
        """
        if self._http is None:
            raise RuntimeError("RuleEvaluationClient is not connected; use 'async with'")

        logger.info("Evaluating rule %s", rule_id)
        try:
            resp = await self._http.post(
                f"/api/rules/{rule_id}/evaluate",
                json=build_evaluation_request(payload),
            )
        except httpx.HTTPError as exc:
            raise RuleEvaluationError(0, f"Request to rule evaluator failed: {exc}") from exc

        self._raise_for_status(resp)
        return self._parse_result(resp.json())

    async def test_rule(self, rule: Rule) -> RuleEvaluationResult:
        """Synthesize test data from rule.conditions and evaluate the rule."""
        payload = synthesize_test_data(rule.conditions)
        logger.debug("Synthesized payload for rule %s: %s", rule.id, payload)
        return await self.evaluate(rule.id, payload)

    # ── Helpers ────────────────────────────────────────────────────────────

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("detail", resp.text)
            except (ValueError, AttributeError):
                detail = resp.text
            raise RuleEvaluationError(resp.status_code, str(detail))

    @staticmethod
    def _parse_result(body: Any) -> RuleEvaluationResult:
        if not isinstance(body, dict):
            raise RuleEvaluationError(0, f"Unexpected evaluator response: {body!r}")
        actions = body.get("executedActions") or body.get("executed_actions") or []
        return RuleEvaluationResult(
            result=bool(body.get("result", False)),
            executed_actions=[
                ExecutedAction(
                    action_id=str(a.get("actionId", a.get("action_id", ""))),
                    success=bool(a.get("success", True)),
                    result=a.get("result"),
                    error=a.get("error"),
                )
                for a in actions
                if isinstance(a, dict)
            ],
            raw=body,
        )

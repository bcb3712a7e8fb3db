"""Application configuration + workflow / rule file loaders for FLOWDESK.

All env vars defined here with FLOWDESK_ prefix.
File loaders: load_workflow_file(), load_rule_file()
"""

from pydantic_settings import BaseSettings
from typing import Optional

from flowdesk.config.loader import load_rule_file, load_workflow_file
from flowdesk.config.schema import RuleFile, WorkflowFile


class FlowdeskConfig(BaseSettings):
    # ── App ──
    app_name: str = "flowdesk"
    debug: bool = False
    log_level: str = "INFO"

    # ── Rule evaluation endpoint ──
    rules_api_base_url: str = "http://localhost:8080"
    rules_api_token: Optional[str] = None       # bearer token, if the API wants one
    rules_api_timeout: float = 30.0             # seconds

    model_config = {"env_prefix": "FLOWDESK_", "env_file": ".env", "extra": "ignore"}


__all__ = [
    "FlowdeskConfig",
    "load_workflow_file",
    "load_rule_file",
    "WorkflowFile",
    "RuleFile",
]

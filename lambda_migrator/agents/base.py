from dataclasses import dataclass
from typing import Dict, Any, Optional
import httpx
from lambda_migrator.core.aws import AwsGateway
from lambda_migrator.core.llm import LLMClient
from lambda_migrator.core.workflow import MigrationStage

@dataclass
class MigrationContext:
    """External clients shared by every stage of one run."""
    aws: AwsGateway
    http: httpx.Client
    llm: Optional[LLMClient] = None
    server_port: int = 3000

@dataclass
class AgentResult:
    stage: MigrationStage
    ok: bool
    message: str
    artifacts_index: Dict[str, Any]

class BaseAgent:
    stage: MigrationStage
    def run(self, ctx: MigrationContext, ws) -> AgentResult:
        raise NotImplementedError

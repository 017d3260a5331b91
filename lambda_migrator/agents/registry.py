from dataclasses import dataclass
from typing import Dict
from lambda_migrator.core.workflow import MigrationStage
from lambda_migrator.agents.base import BaseAgent
from lambda_migrator.agents.impl_functions import FunctionListerAgent
from lambda_migrator.agents.impl_fetch import CodeFetcherAgent
from lambda_migrator.agents.impl_convert import HandlerConverterAgent
from lambda_migrator.agents.impl_routes import RouteExtractorAgent
from lambda_migrator.agents.impl_server import ServerAssemblerAgent

@dataclass
class AgentRegistry:
    mapping: Dict[MigrationStage, BaseAgent]

    def get(self, stage: MigrationStage) -> BaseAgent:
        return self.mapping[stage]

    @staticmethod
    def default() -> "AgentRegistry":
        return AgentRegistry(mapping={
            MigrationStage.LIST_FUNCTIONS: FunctionListerAgent(),
            MigrationStage.FETCH_CODE: CodeFetcherAgent(),
            MigrationStage.CONVERT_HANDLERS: HandlerConverterAgent(),
            MigrationStage.EXTRACT_ROUTES: RouteExtractorAgent(),
            MigrationStage.ASSEMBLE_SERVER: ServerAssemblerAgent(),
        })

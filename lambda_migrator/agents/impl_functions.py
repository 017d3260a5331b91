import json
import logging
from lambda_migrator.agents.base import BaseAgent, AgentResult
from lambda_migrator.core.workflow import MigrationStage

log = logging.getLogger(__name__)

class FunctionListerAgent(BaseAgent):
    stage = MigrationStage.LIST_FUNCTIONS

    def run(self, ctx, ws):
        log.info("Listing Lambda functions...", extra={"stage": self.stage.value})
        try:
            functions = ctx.aws.list_functions()
            ws.function_list_path.write_text(
                json.dumps({"Functions": functions}, indent=2, default=str),
                encoding="utf-8",
            )
            names = [fn["FunctionName"] for fn in functions]
            ws.names_path.write_text("".join(f"{name}\n" for name in names), encoding="utf-8")
            return AgentResult(self.stage, True, f"Listed {len(names)} functions", {
                "function_list": ws.relative(ws.function_list_path),
                "function_names": ws.relative(ws.names_path),
                "function_count": len(names),
            })
        except Exception as e:
            return AgentResult(self.stage, False, f"Failed to list functions: {e}", {})

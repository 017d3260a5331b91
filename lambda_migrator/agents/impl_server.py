import logging
from lambda_migrator.agents.base import BaseAgent, AgentResult
from lambda_migrator.core.workflow import MigrationStage
from lambda_migrator.generators.server_gen import generate_server

log = logging.getLogger(__name__)

class ServerAssemblerAgent(BaseAgent):
    stage = MigrationStage.ASSEMBLE_SERVER

    def run(self, ctx, ws):
        log.info("Building Node.js server...", extra={"stage": self.stage.value})
        try:
            # Routes extracted from API Gateway are not wired in; handlers mount by filename
            generated_files = generate_server(
                out_dir=ws.root,
                port=ctx.server_port,
                handlers_dir=ws.relative(ws.converted_dir),
            )
            return AgentResult(
                self.stage,
                True,
                f"Generated {len(generated_files)} server files",
                {"server_files": [f.path for f in generated_files]},
            )
        except Exception as e:
            return AgentResult(self.stage, False, f"Server generation failed: {e}", {})

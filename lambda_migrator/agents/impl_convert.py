import json
import logging
from lambda_migrator.agents.base import BaseAgent, AgentResult
from lambda_migrator.core.workflow import MigrationStage
from lambda_migrator.schemas.migration import FunctionRecord

log = logging.getLogger(__name__)

class HandlerConverterAgent(BaseAgent):
    stage = MigrationStage.CONVERT_HANDLERS

    def run(self, ctx, ws):
        log.info("Converting Lambda handlers...", extra={"stage": self.stage.value})
        if ctx.llm is None:
            return AgentResult(self.stage, False, "No LLM client configured", {})

        converted, skipped = [], []
        name = None
        try:
            for name in ws.read_names():
                log.info("Converting %s", name, extra={"stage": self.stage.value, "function": name})
                if self.convert_one(ctx, ws, name):
                    converted.append(name)
                else:
                    skipped.append(name)
        except Exception as e:
            return AgentResult(self.stage, False, f"Failed to convert {name or 'function list'}: {e}", {
                "converted_functions": converted,
                "skipped_functions": skipped,
            })

        return AgentResult(self.stage, True, f"Converted {len(converted)} handlers, skipped {len(skipped)}", {
            "converted_dir": ws.relative(ws.converted_dir),
            "converted_functions": converted,
            "skipped_functions": skipped,
        })

    def convert_one(self, ctx, ws, name: str) -> bool:
        """Convert one function's handler; False when its source file is missing."""
        response = json.loads(ws.function_metadata(name).read_text(encoding="utf-8"))
        record = FunctionRecord.from_get_function(response)
        handler_file = ws.function_code_dir(name) / record.source_filename(ws.source_ext)

        if not handler_file.is_file():
            log.warning("Handler file not found for %s, skipping", name,
                        extra={"stage": self.stage.value, "function": name})
            return False

        original_code = handler_file.read_text(encoding="utf-8")
        content = ctx.llm.convert_handler(original_code)
        if content is None:
            # Model output is trusted verbatim; an absent completion is recorded as an empty file
            log.warning("No completion content returned for %s", name,
                        extra={"stage": self.stage.value, "function": name})
            content = ""

        ws.converted_handler(name).write_text(content, encoding="utf-8")
        return True

import json
import logging
import shutil
import zipfile
from lambda_migrator.agents.base import BaseAgent, AgentResult
from lambda_migrator.core.workflow import MigrationStage
from lambda_migrator.schemas.migration import FunctionRecord

log = logging.getLogger(__name__)

class CodeFetcherAgent(BaseAgent):
    stage = MigrationStage.FETCH_CODE

    def run(self, ctx, ws):
        log.info("Downloading Lambda code...", extra={"stage": self.stage.value})
        fetched = []
        name = None
        try:
            for name in ws.read_names():
                log.info("Fetching %s", name, extra={"stage": self.stage.value, "function": name})
                self._fetch_one(ctx, ws, name)
                fetched.append(name)
        except Exception as e:
            return AgentResult(self.stage, False, f"Failed to fetch code for {name or 'function list'}: {e}", {
                "fetched_functions": fetched,
            })
        return AgentResult(self.stage, True, f"Fetched code for {len(fetched)} functions", {
            "lambdas_dir": ws.relative(ws.lambdas_dir),
            "fetched_functions": fetched,
        })

    def _fetch_one(self, ctx, ws, name: str) -> None:
        response = ctx.aws.get_function(name)
        ws.function_metadata(name).write_text(
            json.dumps(response, indent=2, default=str), encoding="utf-8"
        )

        record = FunctionRecord.from_get_function(response)
        if not record.code_location:
            raise ValueError(f"no Code.Location in get-function response for {name}")

        archive = ws.function_archive(name)
        with ctx.http.stream("GET", record.code_location) as r:
            r.raise_for_status()
            with open(archive, "wb") as f:
                for chunk in r.iter_bytes():
                    f.write(chunk)

        # Rebuild the code tree so a rerun leaves no files from an older deployment
        code_dir = ws.function_code_dir(name)
        if code_dir.exists():
            shutil.rmtree(code_dir)
        code_dir.mkdir(parents=True)
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(code_dir)

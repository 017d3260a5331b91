from __future__ import annotations
import logging
from datetime import datetime
from lambda_migrator.core.workflow import MigrationStage, PIPELINE
from lambda_migrator.schemas.migration import RunManifest
from lambda_migrator.workspace.manager import OutputLayout
from lambda_migrator.agents.base import MigrationContext
from lambda_migrator.agents.registry import AgentRegistry

log = logging.getLogger(__name__)

class WorkflowEngine:
    def __init__(self, ctx: MigrationContext, workspace: OutputLayout, registry: AgentRegistry | None = None):
        self.ctx = ctx
        self.ws = workspace
        self.registry = registry or AgentRegistry.default()
        self.manifest = RunManifest()

    def _save_manifest(self) -> None:
        self.ws.manifest_path.write_text(self.manifest.model_dump_json(indent=2), encoding="utf-8")

    def _set_stage(self, stage: MigrationStage) -> None:
        self.manifest.stage = stage
        self._save_manifest()

    def _merge_artifacts(self, updates: dict) -> None:
        self.manifest.artifacts.update(updates)
        self._save_manifest()

    def run(self) -> RunManifest:
        self.ws.ensure()

        for stage in PIPELINE:
            self._set_stage(stage)
            log.info("Running stage", extra={"stage": stage.value})

            agent = self.registry.get(stage)
            result = agent.run(ctx=self.ctx, ws=self.ws)

            self._merge_artifacts(result.artifacts_index)

            if not result.ok:
                log.error("Stage failed: %s", result.message, extra={"stage": stage.value})
                self.manifest.status = "FAILED"
                self.manifest.error_message = result.message
                self.manifest.stage = MigrationStage.FAILED
                self.manifest.finished_at = datetime.utcnow()
                self._save_manifest()
                raise RuntimeError(result.message)

            log.info("%s", result.message, extra={"stage": stage.value})
            self.manifest.completed_stages.append(stage)

        self.manifest.status = "DONE"
        self.manifest.stage = MigrationStage.DONE
        self.manifest.finished_at = datetime.utcnow()
        self._save_manifest()
        return self.manifest

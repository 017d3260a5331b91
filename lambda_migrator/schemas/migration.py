from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import datetime
from lambda_migrator.core.workflow import MigrationStage


def handler_source_filename(handler: str, ext: str = ".js") -> str:
    """Source file named by a handler string: "index.handler" -> "index.js"."""
    return handler.split(".", 1)[0] + ext


class FunctionRecord(BaseModel):
    name: str
    handler: str = ""
    runtime: Optional[str] = None
    code_location: Optional[str] = None

    @classmethod
    def from_get_function(cls, response: Dict[str, Any]) -> "FunctionRecord":
        configuration = response.get("Configuration") or {}
        return cls(
            name=configuration.get("FunctionName", ""),
            handler=configuration.get("Handler") or "",
            runtime=configuration.get("Runtime"),
            code_location=(response.get("Code") or {}).get("Location"),
        )

    def source_filename(self, ext: str = ".js") -> str:
        return handler_source_filename(self.handler, ext)


class RouteDescriptor(BaseModel):
    path: str
    methods: List[str]

    @classmethod
    def from_resource(cls, resource: Dict[str, Any]) -> Optional["RouteDescriptor"]:
        """None for resources that declare no HTTP methods."""
        methods = list((resource.get("resourceMethods") or {}).keys())
        if not methods:
            return None
        return cls(path=resource.get("path", ""), methods=methods)


class RunManifest(BaseModel):
    status: str = "RUNNING"
    stage: MigrationStage = MigrationStage.LIST_FUNCTIONS
    started_at: datetime = Field(default_factory=datetime.utcnow)
    finished_at: Optional[datetime] = None
    completed_stages: List[MigrationStage] = []
    error_message: Optional[str] = None
    artifacts: Dict[str, Any] = {}

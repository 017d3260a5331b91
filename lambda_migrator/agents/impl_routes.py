import json
import logging
from lambda_migrator.agents.base import BaseAgent, AgentResult
from lambda_migrator.core.workflow import MigrationStage
from lambda_migrator.schemas.migration import RouteDescriptor

log = logging.getLogger(__name__)


def extract_routes(resources):
    """Project gateway resources to route descriptors, dropping method-less ones."""
    routes = []
    for resource in resources:
        route = RouteDescriptor.from_resource(resource)
        if route is not None:
            routes.append(route)
    return routes


class RouteExtractorAgent(BaseAgent):
    stage = MigrationStage.EXTRACT_ROUTES

    def run(self, ctx, ws):
        log.info("Extracting API Gateway routes...", extra={"stage": self.stage.value})
        try:
            apis = ctx.aws.get_rest_apis()
            ws.apis_path.write_text(json.dumps({"items": apis}, indent=2, default=str), encoding="utf-8")

            # Only the first REST API is considered
            if not apis:
                log.warning("No REST APIs found", extra={"stage": self.stage.value})
                resources = []
                api_id = None
            else:
                api_id = apis[0]["id"]
                if len(apis) > 1:
                    log.info("Using first of %d REST APIs (%s)", len(apis), api_id,
                             extra={"stage": self.stage.value})
                resources = ctx.aws.get_resources(api_id)
            ws.resources_path.write_text(
                json.dumps({"items": resources}, indent=2, default=str), encoding="utf-8"
            )

            routes = extract_routes(resources)
            ws.routes_path.write_text(
                json.dumps([route.model_dump() for route in routes], indent=2), encoding="utf-8"
            )
            return AgentResult(self.stage, True, f"Extracted {len(routes)} routes", {
                "rest_api_id": api_id,
                "routes": ws.relative(ws.routes_path),
                "route_count": len(routes),
            })
        except Exception as e:
            return AgentResult(self.stage, False, f"Failed to extract routes: {e}", {})

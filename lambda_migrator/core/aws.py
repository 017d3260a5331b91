"""Thin wrapper around the boto3 Lambda and API Gateway clients."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List
import boto3


def _strip_metadata(response: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in response.items() if k != "ResponseMetadata"}


@dataclass
class AwsGateway:
    lambda_client: Any
    apigateway_client: Any

    @classmethod
    def from_session(cls, region: str | None = None, profile: str | None = None) -> "AwsGateway":
        session = boto3.Session(region_name=region, profile_name=profile)
        return cls(
            lambda_client=session.client("lambda"),
            apigateway_client=session.client("apigateway"),
        )

    def list_functions(self) -> List[Dict[str, Any]]:
        """Return every function descriptor, following NextMarker pages."""
        functions: List[Dict[str, Any]] = []
        paginator = self.lambda_client.get_paginator("list_functions")
        for page in paginator.paginate():
            functions.extend(page.get("Functions", []))
        return functions

    def get_function(self, name: str) -> Dict[str, Any]:
        return _strip_metadata(self.lambda_client.get_function(FunctionName=name))

    def get_rest_apis(self) -> List[Dict[str, Any]]:
        apis: List[Dict[str, Any]] = []
        paginator = self.apigateway_client.get_paginator("get_rest_apis")
        for page in paginator.paginate():
            apis.extend(page.get("items", []))
        return apis

    def get_resources(self, rest_api_id: str) -> List[Dict[str, Any]]:
        resources: List[Dict[str, Any]] = []
        paginator = self.apigateway_client.get_paginator("get_resources")
        for page in paginator.paginate(restApiId=rest_api_id):
            resources.extend(page.get("items", []))
        return resources

"""Unit tests for AwsGateway with mocked boto3 clients (no network calls)."""
from unittest.mock import MagicMock
from lambda_migrator.core.aws import AwsGateway


def _paginated(pages):
    paginator = MagicMock()
    paginator.paginate.return_value = iter(pages)
    return paginator


def test_list_functions_follows_every_page():
    lambda_client = MagicMock()
    lambda_client.get_paginator.return_value = _paginated([
        {"Functions": [{"FunctionName": "fnA"}, {"FunctionName": "fnB"}], "NextMarker": "m1"},
        {"Functions": [{"FunctionName": "fnC"}]},
    ])
    gateway = AwsGateway(lambda_client=lambda_client, apigateway_client=MagicMock())

    functions = gateway.list_functions()

    lambda_client.get_paginator.assert_called_once_with("list_functions")
    assert [f["FunctionName"] for f in functions] == ["fnA", "fnB", "fnC"]


def test_get_function_drops_response_metadata():
    lambda_client = MagicMock()
    lambda_client.get_function.return_value = {
        "Configuration": {"FunctionName": "fnA"},
        "Code": {"Location": "https://code.example/fnA.zip"},
        "ResponseMetadata": {"HTTPStatusCode": 200},
    }
    gateway = AwsGateway(lambda_client=lambda_client, apigateway_client=MagicMock())

    response = gateway.get_function("fnA")

    lambda_client.get_function.assert_called_once_with(FunctionName="fnA")
    assert "ResponseMetadata" not in response
    assert response["Code"]["Location"] == "https://code.example/fnA.zip"


def test_get_resources_passes_api_id_and_collects_pages():
    apigateway_client = MagicMock()
    paginator = _paginated([
        {"items": [{"id": "r1", "path": "/"}]},
        {"items": [{"id": "r2", "path": "/users"}]},
    ])
    apigateway_client.get_paginator.return_value = paginator
    gateway = AwsGateway(lambda_client=MagicMock(), apigateway_client=apigateway_client)

    resources = gateway.get_resources("api123")

    paginator.paginate.assert_called_once_with(restApiId="api123")
    assert [r["path"] for r in resources] == ["/", "/users"]


def test_get_rest_apis_empty():
    apigateway_client = MagicMock()
    apigateway_client.get_paginator.return_value = _paginated([{"items": []}])
    gateway = AwsGateway(lambda_client=MagicMock(), apigateway_client=apigateway_client)

    assert gateway.get_rest_apis() == []

"""End-to-end workflow tests with mocked AWS, downloads and chat completions."""
import io
import json
import logging
import tempfile
import zipfile
from pathlib import Path
from unittest.mock import MagicMock
import httpx
import pytest
from lambda_migrator.agents.base import MigrationContext
from lambda_migrator.core.engine import WorkflowEngine
from lambda_migrator.core.llm import LLMClient
from lambda_migrator.core.workflow import MigrationStage, PIPELINE
from lambda_migrator.workspace.manager import OutputLayout

FUNCTIONS = {
    "fnA": {"handler": "index.handler", "files": {"index.js": "exports.handler = async (event) => ({ statusCode: 200 });"}},
    "fnB": {"handler": "app.main", "files": {"handler.js": "exports.main = async () => ({});"}},
}

CONVERTED = "export default (req, res) => res.status(200).end();"


def make_zip(files):
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buf.getvalue()


# Built once so repeated downloads return identical bytes
ARCHIVES = {name: make_zip(fn["files"]) for name, fn in FUNCTIONS.items()}


def make_aws(fail_on=None):
    aws = MagicMock()
    aws.list_functions.return_value = [
        {"FunctionName": name, "Handler": fn["handler"], "Runtime": "nodejs20.x"}
        for name, fn in FUNCTIONS.items()
    ]

    def get_function(name):
        if name == fail_on:
            raise RuntimeError(f"ResourceNotFoundException: {name}")
        return {
            "Configuration": {"FunctionName": name, "Handler": FUNCTIONS[name]["handler"]},
            "Code": {"Location": f"https://code.example/{name}.zip"},
        }

    aws.get_function.side_effect = get_function
    aws.get_rest_apis.return_value = [{"id": "api1", "name": "legacy-api"}]
    aws.get_resources.return_value = [
        {"id": "root", "path": "/"},
        {"id": "r1", "path": "/fnA", "resourceMethods": {"POST": {}}},
    ]
    return aws


def make_context(aws, downloads, prompts):
    def download(request: httpx.Request) -> httpx.Response:
        name = request.url.path.strip("/").removesuffix(".zip")
        downloads.append(name)
        return httpx.Response(200, content=ARCHIVES[name])

    def complete(request: httpx.Request) -> httpx.Response:
        prompts.append(json.loads(request.content)["messages"][0]["content"])
        return httpx.Response(200, json={"choices": [{"message": {"content": CONVERTED}}]})

    llm = LLMClient(token="sk-test", api_base="https://llm.example/v1", transport=httpx.MockTransport(complete))
    http = httpx.Client(transport=httpx.MockTransport(download))
    return MigrationContext(aws=aws, http=http, llm=llm)


def snapshot(root: Path):
    return {str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


def test_fnA_converted_fnB_skipped(caplog):
    with tempfile.TemporaryDirectory() as temp_dir:
        ws = OutputLayout(root=Path(temp_dir) / "migration_output")
        downloads, prompts = [], []
        ctx = make_context(make_aws(), downloads, prompts)

        with caplog.at_level(logging.INFO):
            manifest = WorkflowEngine(ctx=ctx, workspace=ws).run()

        assert manifest.status == "DONE"
        assert manifest.stage == MigrationStage.DONE
        assert manifest.completed_stages == PIPELINE

        assert downloads == ["fnA", "fnB"]
        assert len(prompts) == 1

        assert [p.name for p in ws.converted_dir.iterdir()] == ["fnA.js"]
        assert ws.converted_handler("fnA").read_text(encoding="utf-8") == CONVERTED

        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("fnB" in w for w in warnings)

        server_js = (ws.root / "server.js").read_text(encoding="utf-8")
        assert "path.join(__dirname, 'converted')" in server_js
        assert "fnA" not in server_js and "fnB" not in server_js

        routes = json.loads(ws.routes_path.read_text(encoding="utf-8"))
        assert routes == [{"path": "/fnA", "methods": ["POST"]}]

        saved = json.loads(ws.manifest_path.read_text(encoding="utf-8"))
        assert saved["status"] == "DONE"
        assert saved["artifacts"]["converted_functions"] == ["fnA"]
        assert saved["artifacts"]["skipped_functions"] == ["fnB"]


def test_rerun_is_idempotent_on_disk():
    with tempfile.TemporaryDirectory() as temp_dir:
        ws = OutputLayout(root=Path(temp_dir))

        WorkflowEngine(ctx=make_context(make_aws(), [], []), workspace=ws).run()
        first = snapshot(ws.root)
        WorkflowEngine(ctx=make_context(make_aws(), [], []), workspace=ws).run()
        second = snapshot(ws.root)

        assert set(first) == set(second)
        for path in first:
            if path == "manifest.json":
                continue
            assert first[path] == second[path], path


def test_fetch_failure_aborts_run():
    with tempfile.TemporaryDirectory() as temp_dir:
        ws = OutputLayout(root=Path(temp_dir))
        downloads, prompts = [], []
        ctx = make_context(make_aws(fail_on="fnB"), downloads, prompts)

        with pytest.raises(RuntimeError, match="fnB"):
            WorkflowEngine(ctx=ctx, workspace=ws).run()

        assert downloads == ["fnA"]
        assert prompts == []
        assert list(ws.converted_dir.iterdir()) == []
        assert not (ws.root / "server.js").exists()
        assert not ws.routes_path.exists()

        saved = json.loads(ws.manifest_path.read_text(encoding="utf-8"))
        assert saved["status"] == "FAILED"
        assert saved["stage"] == "FAILED"
        assert saved["completed_stages"] == ["LIST_FUNCTIONS"]
        assert "fnB" in saved["error_message"]

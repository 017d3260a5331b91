"""Orchestrator for server generation."""
from pathlib import Path
from typing import List
from lambda_migrator.generators.server_gen.types import GeneratedFile
from lambda_migrator.generators.server_gen.render import render_server_js, render_package_json
from lambda_migrator.generators.server_gen.writer import write_files


def generate_server(out_dir: Path, port: int = 3000, handlers_dir: str = "converted") -> List[GeneratedFile]:
    """
    Generate the Express server entry point next to the converted handlers.

    Args:
        out_dir: Output root holding the converted handlers folder
        port: Port the generated server listens on
        handlers_dir: Name of the converted handlers folder under out_dir

    Returns:
        List of GeneratedFile objects
    """
    files = [
        GeneratedFile(path="server.js", content=render_server_js(port=port, handlers_dir=handlers_dir)),
        GeneratedFile(path="package.json", content=render_package_json()),
    ]
    write_files(files, out_dir)
    return files

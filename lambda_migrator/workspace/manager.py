"""Filesystem layout of a migration run, rooted at one output directory."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputLayout:
    root: Path
    source_ext: str = ".js"

    @property
    def lambdas_dir(self) -> Path:
        return self.root / "lambdas"

    @property
    def routes_dir(self) -> Path:
        return self.root / "routes"

    @property
    def converted_dir(self) -> Path:
        return self.root / "converted"

    @property
    def function_list_path(self) -> Path:
        return self.root / "lambda_list.json"

    @property
    def names_path(self) -> Path:
        return self.root / "lambda_names.txt"

    @property
    def apis_path(self) -> Path:
        return self.root / "apis.json"

    @property
    def resources_path(self) -> Path:
        return self.root / "resources.json"

    @property
    def routes_path(self) -> Path:
        return self.routes_dir / "routes.json"

    @property
    def manifest_path(self) -> Path:
        return self.root / "manifest.json"

    def function_metadata(self, name: str) -> Path:
        return self.lambdas_dir / f"{name}.json"

    def function_archive(self, name: str) -> Path:
        return self.lambdas_dir / f"{name}.zip"

    def function_code_dir(self, name: str) -> Path:
        return self.lambdas_dir / name

    def converted_handler(self, name: str) -> Path:
        return self.converted_dir / f"{name}{self.source_ext}"

    def read_names(self) -> list[str]:
        """Function names from the lister's name file, blank lines dropped."""
        text = self.names_path.read_text(encoding="utf-8")
        return [line.strip() for line in text.splitlines() if line.strip()]

    def relative(self, path: Path) -> str:
        return str(path.relative_to(self.root))

    def ensure(self) -> None:
        for d in (self.root, self.lambdas_dir, self.routes_dir, self.converted_dir):
            d.mkdir(parents=True, exist_ok=True)

"""
Migrate AWS Lambda functions to an Express server.

Usage: lambda-migrator [--output-dir DIR] [--model MODEL] [--region REGION]
"""
import argparse
import logging
import sys
from pathlib import Path
import httpx
from lambda_migrator.core.config import settings
from lambda_migrator.core.logging import configure_logging
from lambda_migrator.core.aws import AwsGateway
from lambda_migrator.core.llm import build_llm_client
from lambda_migrator.core.engine import WorkflowEngine
from lambda_migrator.agents.base import MigrationContext
from lambda_migrator.workspace.manager import OutputLayout

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lambda-migrator",
        description="Convert deployed Lambda handlers into Express routes",
    )
    parser.add_argument("--output-dir", default=settings.output_dir,
                        help=f"Output root (default: {settings.output_dir})")
    parser.add_argument("--model", default=settings.openai_model,
                        help=f"Chat completions model (default: {settings.openai_model})")
    parser.add_argument("--region", default=settings.aws_region, help="AWS region")
    parser.add_argument("--profile", default=settings.aws_profile, help="AWS named profile")
    parser.add_argument("--port", type=int, default=settings.server_port,
                        help=f"Port for the generated server (default: {settings.server_port})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def run_migration(args: argparse.Namespace) -> int:
    ws = OutputLayout(root=Path(args.output_dir))
    try:
        llm = build_llm_client(model=args.model)
        aws = AwsGateway.from_session(region=args.region, profile=args.profile)
        with httpx.Client(timeout=settings.http_timeout, follow_redirects=True) as http:
            ctx = MigrationContext(aws=aws, http=http, llm=llm, server_port=args.port)
            WorkflowEngine(ctx=ctx, workspace=ws).run()
    except Exception as e:
        log.error("Migration failed: %s", e)
        return 1

    log.info("Done. Output in %s", ws.root)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level))
    return run_migration(args)


if __name__ == "__main__":
    sys.exit(main())

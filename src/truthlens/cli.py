"""CLI for TruthLens content analysis."""

import argparse
import asyncio
import json
import logging
import mimetypes
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator

from truthlens.config import get_default_config_path, load_config
from truthlens.config.factory import create_from_config
from truthlens.data import AnalysisKind, MediaSubmission, Submission, Surface
from truthlens.errors import ValidationError
from truthlens.responses import error_response, result_response

logger = logging.getLogger(__name__)

MEDIA_COMMAND = "media"


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    content: str
    config: Path
    surface: Surface = Surface.EXTENSION
    user: str | None = None
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("command")
    @classmethod
    def command_must_be_known(cls, v: str) -> str:
        known = {MEDIA_COMMAND, AnalysisKind.FACT_CHECK.value, AnalysisKind.BIAS.value}
        if v not in known:
            raise ValueError(f"Unknown command: {v}")
        return v


def _read_media(path: Path) -> MediaSubmission:
    if not path.is_file():
        raise ValidationError("No file provided.")
    content_type, _ = mimetypes.guess_type(path.name)
    return MediaSubmission(
        filename=path.name,
        content_type=content_type or "application/octet-stream",
        data=path.read_bytes(),
    )


async def run(args: CLIArgs) -> tuple[int, dict[str, Any]]:
    """Execute one analysis and return the response status and body.

    Args:
        args: Validated CLI arguments.
    """
    try:
        config = load_config(args.config)
        pipeline, run_logger = create_from_config(
            config,
            log_override=args.log if args.log else None,
            log_dir_override=args.log_dir if args.log_dir != "logs" else None,
        )
        if args.command == MEDIA_COMMAND:
            result, usage = await pipeline.verify_media(
                _read_media(Path(args.content)), surface=args.surface, user_id=args.user
            )
        else:
            submission = Submission(content=args.content, kind=AnalysisKind(args.command))
            result, usage = await pipeline.analyze(
                submission, surface=args.surface, user_id=args.user
            )
    except Exception as e:
        return error_response(e)

    logger.info("\n--- Usage Summary ---")
    logger.info(f"API calls: {len(usage.api_calls)}")
    logger.info(f"Input tokens: {usage.input_tokens:,}")
    logger.info(f"Output tokens: {usage.output_tokens:,}")
    if usage.fetch_requests:
        logger.info(f"URL fetches: {usage.fetch_requests}")
    if usage.forensics_requests:
        logger.info(f"Forensics requests: {usage.forensics_requests}")
    if run_logger and run_logger.last_log_path:
        logger.info(f"Run log written to: {run_logger.last_log_path}")

    return result_response(result)


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Fact-check, bias-analyze or verify content with TruthLens."
    )
    parser.add_argument(
        "command",
        choices=[AnalysisKind.FACT_CHECK.value, AnalysisKind.BIAS.value, MEDIA_COMMAND],
        help="Analysis to run",
    )
    parser.add_argument(
        "content",
        help="Text or URL to analyze, or a file path for 'media'",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--surface",
        choices=[s.value for s in Surface],
        default=Surface.EXTENSION.value,
        help="Deployment surface to emulate (default: extension)",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Signed-in user id (required for the app surface)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable per-stage pipeline logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            content=ns.content,
            config=config_path,
            surface=Surface(ns.surface),
            user=ns.user,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        status, body = asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)

    print(json.dumps(body, indent=2))
    sys.exit(0 if status == 200 else 1)


if __name__ == "__main__":
    main()

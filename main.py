#!/usr/bin/env python
"""CLI for the news verifier."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from news_verifier.config import create_from_config, get_default_config_path, load_config
from news_verifier.data import Claim
from news_verifier.errors import VerifierError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    text: str
    url: str | None = None
    config: Path
    log: bool = False
    log_dir: str = "logs"

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("News content is required")
        return v

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Verify the given news text and print the verdict.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    verifier = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )
    claim = Claim(text=args.text, source_url=args.url)

    logger.info(f"Config: {args.config}")
    analysis = await verifier.analyze(claim)
    result = analysis.result

    print("\nCross-reference results:\n")
    for outlet in config.outlets:
        verdict = result.outlets[outlet.label]
        status = "verified" if verdict.verified else "not verified"
        print(f"{outlet.display_name}: {status} ({verdict.similarity:.0f}% similarity)")
        for match in verdict.articles:
            print(f"   - {match.title} ({match.similarity:.0f}%)")
            if match.url:
                print(f"     {match.url}")

    print(f"\nLegitimacy score: {result.legitimacy_score:.0f}")
    if result.red_flags:
        print(f"Red flags: {', '.join(result.red_flags)}")
    if result.overall_assessment:
        print(f"\n{result.overall_assessment}")

    overall = analysis.overall
    print(f"\nOverall score: {overall.score} -> {overall.verdict}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Verify news text against major outlets.")
    parser.add_argument(
        "text",
        help="News content to verify (first line is treated as the headline)",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Source URL of the news content",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable per-run JSON logging of intermediate stages",
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
            text=ns.text,
            url=ns.url,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except VerifierError as e:
        logger.error(f"{e.message}: {e.details}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()

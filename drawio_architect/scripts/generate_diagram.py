"""
Command line diagram generation.

Usage:
    python -m drawio_architect.scripts.generate_diagram --text "A login flow with start, check, success, fail, end"
    python -m drawio_architect.scripts.generate_diagram --file architecture.pdf --output architecture.drawio
    python -m drawio_architect.scripts.generate_diagram --file notes.docx --analyze-only

Purpose:
- Run the analyze and generate phases without the HTTP server
- Write the recovered mxGraphModel XML to a file or stdout

Dependencies: argparse, asyncio, drawio_architect
System role: Developer helper for one-off diagram generation
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from drawio_architect.application.services import DiagramService
from drawio_architect.boundary.gemini.completion_gateway import GeminiCompletionGateway
from drawio_architect.configs import get_settings
from drawio_architect.core.exceptions import DiagramArchitectError
from drawio_architect.core.generation.orchestrator import GenerationOrchestrator
from drawio_architect.models.source_input import DocumentSource, TextSource
from drawio_architect.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Generate a Draw.io diagram with Gemini")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Diagram description")
    source.add_argument("--file", type=Path, help="Document to analyze (.pdf, .docx, .txt)")
    parser.add_argument("--output", type=Path, help="Write XML here instead of stdout")
    parser.add_argument(
        "--analyze-only",
        action="store_true",
        help="Print the derived description and stop (requires --file)",
    )
    return parser


def build_service() -> DiagramService:
    """Wire the orchestrator from environment settings."""
    settings = get_settings()
    gateway = GeminiCompletionGateway(
        api_key=settings.gemini.api_key,
        timeout_seconds=settings.gemini.timeout_seconds,
    )
    orchestrator = GenerationOrchestrator(
        gateway=gateway,
        analysis_model=settings.gemini.analysis_model,
        generation_model=settings.gemini.generation_model,
        service_max_attempts=settings.generation.service_max_attempts,
        retry_wait_seconds=settings.generation.retry_wait_seconds,
    )
    return DiagramService(orchestrator=orchestrator)


async def run(args: argparse.Namespace, service: DiagramService) -> str:
    """Execute the requested phases and return the text to emit."""
    if args.file is not None:
        source = DocumentSource.from_path(args.file)
        if args.analyze_only:
            analysis = await service.analyze_document(source)
            return analysis.description
    else:
        source = TextSource(content=args.text)
    return await service.generate_from_source(source)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.analyze_only and args.file is None:
        parser.error("--analyze-only requires --file")

    settings = get_settings()
    configure_logging(settings.log_level, stream=sys.stderr)

    try:
        service = build_service()
        result = asyncio.run(run(args, service))
    except DiagramArchitectError as e:
        logger.error(f"{e.kind}: {e}")
        print(f"Error ({e.kind}): {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error ({type(e).__name__}): {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(result, encoding="utf-8")
        logger.info(f"Wrote {len(result)} characters to {args.output}")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI entry point for the RobCo qualification service."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from app.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def serve(host: str, port: int):
    """Run the HTTP API."""
    import uvicorn

    logger.info(f"Listening on http://{host}:{port}")
    uvicorn.run("app.api.main:app", host=host, port=port, log_level=settings.log_level.lower())


async def analyze_once(url: str, company_name: Optional[str] = None) -> dict:
    """Run a single qualification with the configured service."""
    from app.api.routes import get_qualification_service

    service = get_qualification_service()
    return await service.analyze(url, company_name)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="RobCo qualification - screen acquisition targets with an LLM"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")

    analyze_parser = subparsers.add_parser("analyze", help="Qualify one company and print JSON")
    analyze_parser.add_argument("url", help="Company website URL")
    analyze_parser.add_argument("--company-name", "-n", default=None, help="Company name (default: URL hostname)")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "serve":
        serve(args.host, args.port)
        return

    from app.qualify import QualificationError

    try:
        result = asyncio.run(analyze_once(args.url, args.company_name))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)
    except QualificationError as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

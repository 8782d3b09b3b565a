"""Application entry point"""
import argparse
import logging
import sys
from typing import List, Optional

from dnscontroller.config import Settings


# Setup logging
def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dnscontroller", description="DNS controller API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="starts the dns-controller api server")
    serve.add_argument("--listen", help="address on which to listen, host:port")
    serve.add_argument("--db-uri", help="URI for database connection")
    serve.add_argument("--debug-sql", action="store_true", default=None, help="toggles debugging for sql driver")
    serve.add_argument("--debug-http", action="store_true", default=None, help="toggles debugging for http server")
    serve.add_argument("--log-level", help="logging level name")

    return parser


def settings_from_args(args: argparse.Namespace, settings: Optional[Settings] = None) -> Settings:
    """Apply command line flags on top of the environment settings"""
    settings = settings or Settings()
    overrides = {}

    if args.listen:
        host, _, port = args.listen.rpartition(":")
        if not host or not port.isdigit():
            raise ValueError(f"invalid listen address: {args.listen}")
        overrides["API_HOST"] = host
        overrides["API_PORT"] = int(port)

    if args.db_uri:
        overrides["DATABASE_URL"] = args.db_uri
    if args.debug_sql is not None:
        overrides["DEBUG_SQL"] = args.debug_sql
    if args.debug_http is not None:
        overrides["DEBUG_HTTP"] = args.debug_http
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level.upper()

    return settings.model_copy(update=overrides)


def serve(settings: Settings) -> None:
    import uvicorn

    from dnscontroller.presentation.rest.app import create_app

    setup_logging(settings.LOG_LEVEL)
    logger = logging.getLogger(__name__)
    logger.info("starting dns-controller api server on %s", settings.listen)

    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        forwarded_allow_ips=",".join(settings.TRUSTED_PROXIES) or None,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        serve(settings_from_args(args))


if __name__ == "__main__":
    main()

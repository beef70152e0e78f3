"""CLI entry point for the Sample Galleries MCP server."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sample_galleries.config.settings import Settings


def main() -> None:
    """Main CLI entry point: serve the samples tools over stdio or HTTP."""
    parser = argparse.ArgumentParser(
        prog="sample-galleries-mcp",
        description="Sample Galleries MCP — Community Samples Gallery search tools",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--transport",
        "-t",
        type=str,
        choices=["stdio", "http"],
        default=None,
        help="MCP transport (overrides config)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Samples search API endpoint (overrides config)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Server bind address for the http transport (overrides config)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Server port for the http transport (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sample-galleries-mcp {_get_version()}",
    )

    args = parser.parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    # Apply CLI overrides
    if args.transport:
        settings.server.transport = args.transport
    if args.base_url:
        settings.samples_api.base_url = args.base_url
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.log_level:
        settings.observability.log_level = args.log_level

    from sample_galleries.observability.logging import setup_logging

    if settings.server.transport == "stdio":
        # stdout carries the MCP protocol
        setup_logging(settings.observability, stream=sys.stderr)
        _run_stdio(settings)
    else:
        setup_logging(settings.observability)
        _check_port(settings.server.host, settings.server.port)
        _run_http(settings)


def _run_stdio(settings: Settings) -> None:
    from sample_galleries.gateway.gateway import SamplesGateway
    from sample_galleries.server.mcp import create_server
    from sample_galleries.tools.samples import SamplesTools

    tools = SamplesTools(SamplesGateway.from_settings(settings.samples_api))
    create_server(tools).run(transport="stdio")


def _run_http(settings: Settings) -> None:
    import uvicorn

    from sample_galleries.api.app import create_app

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.observability.log_level.lower(),
    )


def _check_port(host: str, port: int) -> None:
    """Check if the port is available. If not, report it and exit."""
    import socket

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host if host != "0.0.0.0" else "127.0.0.1", port))
    except OSError:
        print(f"Error: Port {port} is already in use. Run 'lsof -i :{port}' to find the process.", file=sys.stderr)
        sys.exit(1)
    finally:
        sock.close()


def _get_version() -> str:
    """Get the package version."""
    try:
        from sample_galleries import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()

"""
Service Status Command.

Queries the AMP status service and prints its name, id and status.
"""

import asyncio
import dataclasses
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from amp_cli.client import AMP_STATUS_SVC, AmpStatus, new_helper
from amp_cli.core.config import get_app_config
from amp_cli.core.exceptions import ApplicationError
from amp_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
err_console = Console(stderr=True)

REPORT_TEMPLATE = "Service Results \n\t Name: {name} \n\t Id: {id}\n\t Status: {status}\n"


@dataclass(frozen=True)
class ServiceOptions:
    """Resolved options for one invocation of the service command."""

    url: str
    timeout: float


def format_status(result: AmpStatus) -> str:
    """Render a status result as the service report."""
    return REPORT_TEMPLATE.format(name=result.name, id=result.id, status=result.status)


def service(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        "-u",
        help="Base URL to connect with (default: client.base_url in application.yaml, http://localhost:32777)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.001,
        help="Request timeout in seconds (default: client.timeout in application.yaml, 10)",
    ),
) -> None:
    """
    Query the status of an AMP service.

    Calls the status endpoint at the base URL and prints the service
    name, id and status. Exits with status 1 if the call fails.

    Examples:
        amp service
        amp service --url http://example.com:9000
        amp service -u http://example.com:9000 -t 2.5
    """
    options = _build_options(url, timeout)

    try:
        result = asyncio.run(_service(options))
    except ApplicationError as e:
        log_with_source(
            logger,
            "cli",
            "error",
            "Service status failed",
            url=options.url,
            code=e.code,
            error=e.message,
        )
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    typer.echo(format_status(result), nl=False)


def _build_options(url: str | None, timeout: float | None) -> ServiceOptions:
    """Merge command-line flags over the configured client defaults."""
    client_config = get_app_config().application.client
    return ServiceOptions(
        url=url if url is not None else client_config.base_url,
        timeout=timeout if timeout is not None else client_config.timeout,
    )


async def _service(options: ServiceOptions) -> AmpStatus:
    """Async implementation of service command."""
    operation = dataclasses.replace(
        AMP_STATUS_SVC,
        path=get_app_config().application.client.status_path,
    )

    async with new_helper(timeout=options.timeout) as helper:
        helper.set_base_url(options.url)
        result = await helper.call(operation)

    log_with_source(
        logger,
        "cli",
        "info",
        "Service status received",
        url=options.url,
        service_id=result.id,
        status=result.status,
    )
    return result

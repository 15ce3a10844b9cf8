from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from systemd_lsp.analysis import Severity, diagnose
from systemd_lsp.config import resolve_settings
from systemd_lsp.schema import CheckResponse, FindingDTO, ServerSettings

app = typer.Typer(add_completion=False)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_TCP_HOST = "127.0.0.1"
_DEFAULT_TCP_PORT = 2087


def configure_logging(settings: ServerSettings) -> None:
    """Route logs to stderr or the configured file; stdout carries the protocol."""
    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=settings.log_level,
        format=_LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


def _resolve_cli_settings(
    config: Optional[Path],
    log_level: Optional[str],
    log_file: Optional[Path],
) -> ServerSettings:
    overrides = {
        "log_level": log_level,
        "log_file": str(log_file) if log_file is not None else None,
    }
    try:
        return resolve_settings(overrides, config_path=config)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def serve(
    tcp: bool = typer.Option(False, "--tcp", help="Listen on TCP instead of stdio."),
    host: str = typer.Option(_DEFAULT_TCP_HOST, "--host"),
    port: int = typer.Option(_DEFAULT_TCP_PORT, "--port"),
    config: Optional[Path] = typer.Option(None, "--config"),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file"),
) -> None:
    """Run the language server."""
    settings = _resolve_cli_settings(config, log_level, log_file)
    configure_logging(settings)

    from systemd_lsp import server as lsp_server

    lsp_server.server.configure(settings)
    start_fn = partial(lsp_server.server.start_tcp, host, port) if tcp else None
    lsp_server.start(start_fn)


def _check_paths(paths: List[Path]) -> CheckResponse:
    response = CheckResponse()
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            response.errors.append(f"{path}: {exc}")
            continue
        response.findings.extend(
            FindingDTO.from_finding(str(path), finding) for finding in diagnose(text)
        )
    return response


@app.command()
def check(
    paths: List[Path] = typer.Argument(..., help="Unit files to diagnose."),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of lint lines."),
) -> None:
    """Diagnose unit files without starting a server."""
    response = _check_paths(paths)
    if json_output:
        typer.echo(response.model_dump_json(indent=2))
    else:
        for finding in response.findings:
            typer.echo(
                f"{finding.path}:{finding.line}:{finding.col}: "
                f"{finding.severity}: {finding.message}"
            )
        for error in response.errors:
            typer.echo(error, err=True)
    if response.errors:
        raise typer.Exit(code=2)
    if any(finding.severity == Severity.ERROR.value for finding in response.findings):
        raise typer.Exit(code=1)


def main() -> None:  # pragma: no cover
    app()

"""Typer CLI entrypoint for the reality check engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger, RequestFileError
from .schemas.config import load_config

app = typer.Typer(help="Career goal reality check CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        try:
            loaded = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise typer.BadParameter(f"Invalid YAML: {exc}", param_hint="config") from exc
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


@app.command()
def evaluate(
    input_path: Path = typer.Option(
        ...,
        "--input",
        exists=True,
        readable=True,
        dir_okay=False,
        help="Request JSON ({profile, goal} or a list of them) or JSONL path.",
    ),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Evaluate career goals and write the assessments."""
    settings = _load_settings(config)
    configure_logging(log_level)

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        results = pipeline.run(
            input_path=input_path,
            output_path=output,
            audit_logger=audit_logger,
        )
    except RequestFileError as exc:
        raise typer.BadParameter(str(exc), param_hint="input") from exc
    typer.echo(f"Evaluated {len(results)} goals. Results saved to {output}.")


@app.command()
def scenarios(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
) -> None:
    """List the reference scenarios goals are matched against."""
    container = create_container(settings=_load_settings(config))
    for scenario in container.scenario_catalog():
        ranges = scenario.timeline_ranges
        typer.echo(
            f"{scenario.id}\t{scenario.name}\t{scenario.target_role}\t"
            f"{ranges.best_case_months}/{ranges.average_case_months}/{ranges.worst_case_months} months"
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()

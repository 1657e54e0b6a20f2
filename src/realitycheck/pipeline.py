"""Batch evaluation of reality check requests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import RealityCheckEvaluator
from .schemas import RealityCheckInput


@dataclass(slots=True)
class EvaluationRequest:
    """One ``{profile, goal}`` record and where it came from."""

    request_id: str
    payload: RealityCheckInput


class RequestLoadError(ValueError):
    """Raised when request loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[EvaluationRequest]):
        super().__init__("Request loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Request loading failed: {self.errors}"


class RequestFileError(ValueError):
    """Raised when a request file cannot be decoded at all."""


class RequestLoader:
    """Load requests from a JSON document (object or list) or a JSONL stream."""

    def load(self, path: Path) -> list[EvaluationRequest]:
        if path.suffix.lower() == ".jsonl":
            records = self._read_lines(path)
        else:
            records = self._read_document(path)

        requests: list[EvaluationRequest] = []
        errors: list[str] = []
        for idx, record, parse_error in records:
            if parse_error:
                errors.append(f"line {idx}: {parse_error}")
                continue
            if not isinstance(record, dict) or not record.get("profile") or not record.get("goal"):
                errors.append(f"line {idx}: missing profile or goal")
                continue
            try:
                payload = RealityCheckInput.model_validate(record)
            except ValidationError as exc:
                errors.append(f"line {idx}: {exc}")
                continue
            request_id = str(record.get("id") or f"request-{idx}")
            requests.append(EvaluationRequest(request_id=request_id, payload=payload))

        if errors:
            raise RequestLoadError(errors, requests)
        return requests

    @staticmethod
    def _read_lines(path: Path) -> list[tuple[int, Any, str | None]]:
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except UnicodeDecodeError as exc:
            raise RequestFileError(f"Request file is not valid UTF-8: {exc}") from exc

        records: list[tuple[int, Any, str | None]] = []
        for idx, line in enumerate(lines, start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                records.append((idx, json.loads(raw), None))
            except json.JSONDecodeError as exc:
                records.append((idx, None, f"invalid JSON ({exc})"))
        return records

    @staticmethod
    def _read_document(path: Path) -> list[tuple[int, Any, str | None]]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except UnicodeDecodeError as exc:
            raise RequestFileError(f"Request file is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RequestFileError(f"Invalid request JSON: {exc}") from exc
        items = data if isinstance(data, list) else [data]
        return [(idx, item, None) for idx, item in enumerate(items, start=1)]


class OutputWriter:
    """Persist evaluation results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class EvaluationPipeline:
    """Load requests, evaluate each one and write the results envelope."""

    def __init__(
        self,
        *,
        evaluator: RealityCheckEvaluator,
        loader: RequestLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._loader = loader or RequestLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        input_path: Path,
        output_path: Path,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            requests = self._loader.load(input_path)
        except RequestLoadError as exc:
            requests = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("requests.partial_load", errors=exc.errors)

        serialized_results: list[dict] = []

        for request in requests:
            result = self._evaluator.evaluate(request.payload.profile, request.payload.goal)
            serialized_results.append({"id": request.request_id, "result": result.to_wire()})

            if audit_logger:
                audit_logger.append(
                    {
                        "id": request.request_id,
                        "target_role": request.payload.goal.target_role,
                        "overall_score": result.overall_score,
                        "score_breakdown": result.score_breakdown.model_dump(),
                        "warning_flags": [warning.flag for warning in result.warnings],
                        "scenario_id": result.metadata.scenario_id,
                        "evaluated_at": result.metadata.evaluated_at,
                    }
                )

            self._logger.info(
                "evaluation.result",
                request_id=request.request_id,
                overall_score=result.overall_score,
                scenario_id=result.metadata.scenario_id,
                warning_count=len(result.warnings),
            )

        payload_with_meta = {
            "metadata": {
                "request_count": len(requests),
                "errors": load_errors,
                "timestamp": pendulum.now("UTC").to_iso8601_string(),
                "app_version": __version__,
            },
            "results": serialized_results,
        }

        self._writer.write(output_path, payload_with_meta)
        return serialized_results

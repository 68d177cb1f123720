from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from pydantic import ValidationError

from pipeline.io.validate import load_named_schema, validate_obj
from validators import validate_result

from .models import PairingConfig
from .optimizer import scan_table, solve
from .render import render_scan, render_text, result_record
from .types import ErrorCodes, PairingError, PairingResult

logger = logging.getLogger("processes.pairing")

EXIT_OK = 0
EXIT_ERROR = 2

KNOWN_KEYS = set(PairingConfig.model_fields)


def _coerce_scalar(val: str) -> int | float | bool | str:
    lower = val.lower()
    if lower in ("true", "false"):
        return lower == "true"
    try:
        if "." in val:
            return float(val)
        return int(val)
    except ValueError:
        return val


def load_config(
    config_path: Path | None, inline_kv: Sequence[str] | None = None
) -> dict[str, Any]:
    cfg: dict[str, Any] = {}
    if config_path:
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise PairingError(
                ErrorCodes.CONFIG_ERROR,
                f"Cannot read config {config_path}: {e}",
                user_message=f"cannot read config file {config_path}",
            ) from e
        if config_path.suffix.lower() in (".yaml", ".yml"):
            parse_errors: tuple[type[Exception], ...] = (
                yaml.YAMLError,
                ValueError,
                TypeError,
            )
            loads = yaml.safe_load
        else:
            parse_errors = (ValueError, TypeError)
            loads = json.loads
        try:
            cfg = dict(loads(text) or {})
        except parse_errors as e:
            raise PairingError(
                ErrorCodes.CONFIG_ERROR,
                f"Cannot parse config {config_path}: {e}",
                user_message=f"config file {config_path} is not a valid mapping",
            ) from e
    if inline_kv:
        for item in inline_kv:
            if "=" not in item:
                continue
            k, v = item.split("=", 1)
            cfg[k.strip()] = _coerce_scalar(v.strip())
    return cfg


def build_config(cfg: Mapping[str, Any]) -> PairingConfig:
    """Validate the merged config mapping. Unknown keys are ignored."""
    known = {k: v for k, v in cfg.items() if k in KNOWN_KEYS}
    try:
        return PairingConfig(**known)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise PairingError(
            ErrorCodes.CONFIG_ERROR,
            f"Invalid pairing config: {e}",
            user_message=f"invalid config value(s) for: {', '.join(fields)}",
            details={"fields": fields},
        ) from e


def _check_result(
    result: PairingResult, telemetry: Mapping[str, Any], schemas_root: Path | None
) -> dict[str, Any]:
    record = result_record(result, telemetry)
    validation = validate_result(record)
    if not validation.valid:
        reasons_str = ", ".join([r.value for r in validation.reasons])
        raise PairingError(
            ErrorCodes.INVALID_RESULT,
            f"Invalid pairing result: {reasons_str}",
            details={"record": record},
        )
    try:
        schema = load_named_schema("pairing_result", schemas_root)
    except (OSError, yaml.YAMLError, SchemaError) as e:
        raise PairingError(
            ErrorCodes.CONFIG_ERROR,
            f"Cannot load pairing_result schema: {e}",
            user_message=f"cannot load result schema from {schemas_root or 'default schemas root'}",
        ) from e
    try:
        validate_obj(schema, record)
    except JsonSchemaValidationError as e:
        raise PairingError(
            ErrorCodes.INVALID_RESULT,
            f"Pairing result does not match schema: {e.message}",
            details={"record": record},
        ) from e
    return record


def run_adapter(
    config: PairingConfig,
    *,
    schemas_root: Path | None = None,
) -> dict[str, Any]:
    t0 = time.time()
    logger.info(
        json.dumps(
            {
                "event": "pairing_enter",
                "target": config.target,
                "strategy": config.strategy,
            }
        )
    )
    result, telemetry = solve(
        config.target, strategy=config.strategy, max_scan=config.max_scan
    )
    record = _check_result(result, telemetry, schemas_root)
    dt = time.time() - t0
    logger.info(
        json.dumps(
            {
                "event": "pairing_exit",
                "target": config.target,
                "strategy": telemetry["strategy"],
                "evaluations": telemetry["evaluations"],
                "score": result.score,
                "dt_s": round(dt, 6),
            }
        )
    )
    return {"result": result, "record": record, "telemetry": telemetry}


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m processes.pairing",
        description="Find a + b = N maximizing a * b * |a - b|",
    )
    p.add_argument("target", nargs="?", type=int, help="Target sum N (default 8)")
    p.add_argument("--config", type=Path, help="YAML or JSON config file")
    p.add_argument("--config-kv", nargs="*", help="Inline overrides key=value")
    p.add_argument("--strategy", choices=["scan", "closed_form", "auto"])
    p.add_argument("--format", dest="output", choices=["text", "json"])
    p.add_argument("--show-scan", action="store_true", default=None)
    p.add_argument(
        "--schemas-root",
        type=Path,
        help="Override schemas root (defaults to repo-relative pipeline/schemas)",
    )
    p.add_argument("--verbose", action="store_true")
    return p


def _merge_cli(cfg: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    merged = dict(cfg)
    for key in ("target", "strategy", "output", "show_scan"):
        val = getattr(args, key)
        if val is not None:
            merged[key] = val
    return merged


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    # no-op when the host application already configured logging
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(name)s %(levelname)s %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        raw = _merge_cli(load_config(args.config, args.config_kv), args)
        config = build_config(raw)
        out = run_adapter(config, schemas_root=args.schemas_root)
        scan = scan_table(config.target, max_scan=config.max_scan) if config.show_scan else None
    except PairingError as e:
        logger.info(json.dumps({"event": "pairing_error", "code": e.code.value}))
        print(f"[pairing] error: {e.user_message}", file=sys.stderr)
        return EXIT_ERROR

    if args.verbose:
        unknown = sorted(set(raw.keys()) - KNOWN_KEYS)
        if unknown:
            print(
                f"[pairing] Warning: unknown config keys ignored: {', '.join(unknown)}",
                file=sys.stderr,
            )
        telemetry = out["telemetry"]
        print(f"[pairing] strategy: {telemetry['strategy']}", file=sys.stderr)
        print(f"[pairing] evaluations: {telemetry['evaluations']}", file=sys.stderr)

    if config.output == "json":
        print(json.dumps(out["record"], indent=2))
    else:
        print(render_text(out["result"], out["telemetry"]))
    if scan is not None:
        print(render_scan(scan))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

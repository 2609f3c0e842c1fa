"""
Urysohn Eval CLI

Evaluates the separating function on the real line at a JSON list of points
and emits JSON.

    python3 -m urysohn.eval_cli --closed "[[0,0]]" --open "[[-1,1]]" "[0,0.5,2]" --pretty
    python3 -m urysohn.eval_cli --separate "[[0,0]]" "[[null,-1],[1,null]]" "[0.25]"
    python3 -m urysohn.eval_cli --closed "[[0,0]]" --open "[[-1,1]]" --certify 4 "[0.3]"

Sets are lists of [lo, hi] pairs; null stands for an infinite endpoint.

Contract: emits JSON with schema tag + schema_doc.
Exit codes: 0 ok, 1 evaluation error (see "warnings"), 2 invalid input.
"""

from __future__ import annotations

import argparse
import datetime
import hashlib
import json
import logging
import math
import sys
from typing import Any, List, Optional

from urysohn.config import load_settings
from urysohn.core.node import CU
from urysohn.engine.approx import depth_for_tolerance, evaluate
from urysohn.engine.continuity import certify
from urysohn.errors import UrysohnError
from urysohn.oracles import wrap_oracle
from urysohn.spaces.real_line import (
    RealLine,
    ThickeningOracle,
    closed_from_json,
    open_from_json,
)

SCHEMA_TAG = "urysohn-eval.v1"
SCHEMA_DOC = "docs/eval_schema.md"

_logger = logging.getLogger("urysohn.eval_cli")


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(inputs: dict[str, Any]) -> str:
    payload = json.dumps(inputs, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _parse_json(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"{what} must be JSON. Parse error: {e}") from e


def _parse_points(text: str) -> List[float]:
    obj = _parse_json(text, "points")
    if not isinstance(obj, list):
        raise ValueError("points JSON must be a list of numbers (e.g. [0, 0.5]).")
    out: List[float] = []
    for i, v in enumerate(obj):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"points[{i}] is not a number: {v!r}")
        if not math.isfinite(v):
            raise ValueError(f"points[{i}] is not finite: {v!r}")
        out.append(float(v))
    return out


def _read_points(args: argparse.Namespace) -> List[float]:
    """
    Priority:
      1) positional points_json
      2) --input-file
      3) --stdin
    """
    if args.points_json is not None:
        return _parse_points(args.points_json)

    if args.input_file is not None:
        with args.input_file as fh:
            return _parse_points(fh.read())

    if args.stdin:
        return _parse_points(sys.stdin.read())

    raise ValueError("No points provided. Use positional JSON, --input-file, or --stdin.")


def _build_root(args: argparse.Namespace, line: RealLine) -> tuple[CU, dict[str, Any]]:
    oracle = wrap_oracle(ThickeningOracle(line), line, args.check_contracts or None)
    if args.separate is not None:
        a = closed_from_json(_parse_json(args.separate[0], "--separate A"))
        b = closed_from_json(_parse_json(args.separate[1], "--separate B"))
        c, u = a, line.complement(b)
        described = {"A": a.to_json(), "B": b.to_json()}
    else:
        if args.closed is None or args.open is None:
            raise ValueError("either --separate A B or both --closed and --open are required")
        c = closed_from_json(_parse_json(args.closed, "--closed"))
        u = open_from_json(_parse_json(args.open, "--open"))
        described = {"C": c.to_json(), "U": u.to_json()}
    return CU.make(c, u, line, oracle), described


def _evaluate_row(root: CU, x: float, tolerance: float, level: Optional[int]) -> dict[str, Any]:
    r = evaluate(root, x, tolerance)
    row: dict[str, Any] = {
        "point": x,
        "value": r.value,
        "depth": r.depth,
        "exact": r.exact,
        "error_bound": r.error_bound,
    }
    if level is not None:
        cert = certify(root, x, level)
        row["certificate"] = {
            "level": cert.level,
            "bound": cert.bound,
            "neighborhood": cert.neighborhood.to_json(),
            "cases": "".join(cert.case_trace),
        }
    return row


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Evaluate a Urysohn function on the real line and emit JSON.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--closed", default=None, help='Closed set C, e.g. "[[0,0]]".')
    ap.add_argument("--open", default=None, help='Open set U containing C, e.g. "[[-1,1]]".')
    ap.add_argument(
        "--separate",
        nargs=2,
        metavar=("A_JSON", "B_JSON"),
        default=None,
        help="Two disjoint closed sets; the function is 0 on A and 1 on B.",
    )
    ap.add_argument("--tolerance", type=float, default=None, help="Absolute error bound (default from config).")
    ap.add_argument("--certify", type=int, default=None, metavar="N", help="Attach a (3/4)^N continuity certificate.")
    ap.add_argument("--check-contracts", action="store_true", help="Validate every oracle call.")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING).")
    ap.add_argument("--stdin", action="store_true", help="Read points JSON from stdin.")
    ap.add_argument(
        "--input-file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="Read points JSON from a file.",
    )
    ap.add_argument("points_json", nargs="?", default=None, help='Points, e.g. "[0, 0.5, 2]".')

    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    line = RealLine()
    try:
        logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
        settings = load_settings()
        tolerance = args.tolerance if args.tolerance is not None else settings.default_tolerance
        depth_for_tolerance(tolerance)
        if args.certify is not None and args.certify < 0:
            raise ValueError(f"--certify must be >= 0, got {args.certify}")
        xs = _read_points(args)
        root, described = _build_root(args, line)
    except (ValueError, TypeError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    warnings: List[str] = []
    results: List[dict[str, Any]] = []
    ok = True
    for x in xs:
        try:
            row = _evaluate_row(root, x, tolerance, args.certify)
        except (UrysohnError, ValueError) as e:
            _logger.error("evaluation at %r failed: %s", x, e)
            ok = False
            warnings.append(f"point {x!r}: {e}")
            row = {"point": x, "error": str(e)}
        results.append(row)

    inputs = {"sets": described, "points": xs, "tolerance": tolerance, "certify": args.certify}
    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "inputs": inputs,
        "results": results,
        "ok": bool(ok),
        "warnings": warnings,
        "meta": {
            "tool": "eval_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(inputs),
            },
        },
    }

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

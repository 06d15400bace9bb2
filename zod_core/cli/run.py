#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point: validate documents against a schema, lint schemas.

Exit status: 0 when everything is valid, 1 when any document is invalid or
unreadable (or any schema has lint issues), 2 when the schema itself cannot be
loaded.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from ..config import validator_config
from ..engine import validate
from ..exceptions import MaxDepthExceededError, SchemaDefinitionError
from ..linter import lint_schema
from ..models.schema_loader import load_document, load_schema
from ..report import errors_to_json, format_errors, github_annotation, github_annotations

logger = logging.getLogger(__name__)


def _check_file(schema, file_path: str, max_depth: Optional[int]) -> Dict[str, Any]:
    result: Dict[str, Any] = {"file": file_path, "valid": False, "errors": [], "error": None}
    try:
        document = load_document(file_path)
        outcome = validate(schema, document, max_depth=max_depth)
    except (SchemaDefinitionError, MaxDepthExceededError) as e:
        result["error"] = str(e)
        return result
    result["valid"] = outcome.ok
    result["errors"] = list(outcome.errors)
    return result


def run_check(args: argparse.Namespace) -> int:
    try:
        schema = load_schema(args.schema)
    except SchemaDefinitionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    results = [_check_file(schema, path, args.max_depth) for path in args.data]
    invalid = sum(1 for r in results if not r["valid"])
    logger.debug(f"Checked {len(results)} document(s) against {args.schema}: {invalid} invalid")

    if args.format == "json":
        output = {
            "schema": args.schema,
            "files": len(results),
            "invalid": invalid,
            "results": [
                {
                    "file": r["file"],
                    "valid": r["valid"],
                    "error": r["error"],
                    "errors": errors_to_json(r["errors"]),
                }
                for r in results
            ],
        }
        print(json.dumps(output, indent=2, default=str))
    elif args.format == "github-actions":
        for r in results:
            if r["error"] is not None:
                print(github_annotation(r["error"], r["file"]))
            for line in github_annotations(r["errors"], r["file"]):
                print(line)
    else:  # human-readable
        for r in results:
            if r["error"] is not None:
                print(f"{r['file']}:\n  ERROR: {r['error']}")
            elif r["errors"]:
                print(f"{r['file']}:\n{format_errors(r['errors'])}")
            else:
                print(f"{r['file']}: OK")

    return 1 if invalid else 0


def run_lint(args: argparse.Namespace) -> int:
    reports: List[Dict[str, Any]] = []
    for path in args.schemas:
        report: Dict[str, Any] = {"file": path, "issues": []}
        try:
            schema = load_schema(path)
        except SchemaDefinitionError as e:
            report["issues"].append({"message": str(e), "schema_path": None})
        else:
            report["issues"] = [
                {"message": issue.message, "schema_path": issue.schema_path} for issue in lint_schema(schema)
            ]
        reports.append(report)

    total = sum(len(r["issues"]) for r in reports)
    logger.debug(f"Linted {len(reports)} schema(s): {total} issue(s)")

    if args.format == "json":
        print(json.dumps({"files": len(reports), "issues": total, "results": reports}, indent=2))
    else:
        for r in reports:
            if not r["issues"]:
                continue
            print(f"\n{r['file']}:")
            for issue in r["issues"]:
                where = f"{issue['schema_path'] or '(root)'}: " if issue["schema_path"] is not None else ""
                print(f"  ERROR: {where}{issue['message']}")
        if total == 0:
            print("Lint succeeded with no issues.")

    return 1 if total else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zod-core",
        description="Validate JSON/YAML documents against zod_core schema documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {validator_config.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate documents against a schema")
    check.add_argument("schema", help="Schema document (.json, .yaml, .yml)")
    check.add_argument("data", nargs="+", help="Data documents to validate")
    check.add_argument(
        "--format",
        choices=["human", "json", "github-actions"],
        default="human",
        help="Output format (default: human)",
    )
    check.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help=f"Maximum nesting depth (default: {validator_config.max_depth})",
    )
    check.set_defaults(handler=run_check)

    lint = subparsers.add_parser("lint", help="Report unsatisfiable constraints in schemas")
    lint.add_argument("schemas", nargs="+", help="Schema documents to lint")
    lint.add_argument(
        "--format",
        choices=["human", "json"],
        default="human",
        help="Output format (default: human)",
    )
    lint.set_defaults(handler=run_lint)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "max_depth", None) is not None and args.max_depth <= 0:
        parser.error("--max-depth must be a positive integer")

    if args.log_level:
        validator_config.log_level = args.log_level
    validator_config.set_logging()

    sys.exit(args.handler(args))


if __name__ == "__main__":
    main()

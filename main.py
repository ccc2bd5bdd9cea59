# main.py
"""CLI entry point for the Content Guardian review system."""

from __future__ import annotations

import argparse
import sys

from orchestration.cli_runner import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content-guardian",
        description="Run editorial review modules against a piece of content.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--save-report",
        action="store_true",
        help="Also write the JSON result to the reports directory",
    )
    common.add_argument(
        "--export-logs", default=None, help="Write the activity log JSON to this path"
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list-modules", parents=[common], help="List available modules")

    run_module = sub.add_parser(
        "run-module", parents=[common], help="Run a single review module"
    )
    run_module.add_argument("module_id")
    run_module.add_argument("content", help="Path to a content JSON file")
    run_module.add_argument(
        "--options", default=None, help="Path to a module options JSON file"
    )

    run_workflow = sub.add_parser(
        "run-workflow", parents=[common], help="Run a workflow file or preset"
    )
    run_workflow.add_argument("workflow", help="Workflow JSON file or preset name")
    run_workflow.add_argument("content", help="Path to a content JSON file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse command-line arguments and run Content Guardian."""
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

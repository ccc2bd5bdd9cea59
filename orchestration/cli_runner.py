# orchestration/cli_runner.py
"""Command-line runner for Content Guardian."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
from typing import Any

import structlog
from config import REPORTS_DIR, settings
from core.activity_log import ActivityLog
from core.errors import GuardianError
from core.llm_interface import CompletionProvider, LLMService
from pydantic import ValidationError
from review_modules import ReviewContext, build_default_modules
from storage.file_manager import FileManager
from utils.logging import setup_logging_guardian

from models import ContentInput, ModuleOptions, WorkflowOptions
from orchestration.controller import ReviewController
from orchestration.workflow_presets import get_preset

logger = structlog.get_logger(__name__)


def build_controller(
    provider: CompletionProvider, log: ActivityLog | None = None
) -> ReviewController:
    """Create a controller with every shipped review module registered."""
    log = log if log is not None else ActivityLog(settings.ACTIVITY_LOG_TO_CONSOLE)
    controller = ReviewController(log)
    for module in build_default_modules(ReviewContext(provider=provider, log=log)):
        controller.register_module(module)
    return controller


async def _load_workflow(files: FileManager, workflow_ref: str) -> WorkflowOptions:
    if os.path.isfile(workflow_ref):
        return WorkflowOptions.model_validate(await files.read_json(workflow_ref))
    return get_preset(workflow_ref)


async def _execute(
    args: argparse.Namespace, controller: ReviewController, files: FileManager
) -> tuple[Any, str | None]:
    """Run the requested command and return its JSON payload and report name."""
    if args.command == "list-modules":
        return controller.describe_modules(), None

    content_input = ContentInput.model_validate(await files.read_json(args.content))

    if args.command == "run-module":
        options = None
        if args.options:
            options = ModuleOptions.model_validate(await files.read_json(args.options))
        result = await controller.run_module(args.module_id, content_input, options)
        return result.to_json_dict(), f"{result.module_id}_{result.metadata.timestamp}"

    workflow = await _load_workflow(files, args.workflow)
    result = await controller.run_workflow(content_input, workflow)
    return result.to_json_dict(), f"workflow_{result.workflow_id}"


async def _run(
    args: argparse.Namespace, provider: CompletionProvider | None = None
) -> int:
    llm_service = None
    if provider is None:
        llm_service = LLMService()
        provider = llm_service
    controller = build_controller(provider)
    files = FileManager(REPORTS_DIR)
    exit_code = 0
    try:
        try:
            payload, report_name = await _execute(args, controller, files)
        except (
            GuardianError,
            ValidationError,
            OSError,
            json.JSONDecodeError,
        ) as err:
            logger.error("Content Guardian command failed", command=args.command, error=str(err))
            payload, report_name, exit_code = {"error": str(err)}, None, 1

        print(json.dumps(payload, indent=2, ensure_ascii=False))

        try:
            if report_name and getattr(args, "save_report", False):
                path = await files.save_report(report_name, payload)
                logger.info("Report saved", path=path)
            if getattr(args, "export_logs", None):
                await files.write_text(args.export_logs, controller.log.export_json())
                logger.info("Activity log exported", path=args.export_logs)
        except OSError as err:
            logger.error("Could not write Content Guardian output", error=str(err))
            exit_code = 1
    finally:
        if llm_service is not None:
            await llm_service.aclose()
    return exit_code


def run(args: argparse.Namespace) -> int:
    """Configure logging, execute the command and return the process exit code."""
    setup_logging_guardian()
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        logger.info("Content Guardian shutting down due to KeyboardInterrupt...")
        return 1

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..fetch import RowSource, SheetClient, UpstreamUnavailable, WorkbookSource
from ..logging.init import log_summary, set_debug, setup_logging
from ..models.subscription_record import SubscriptionRecord
from ..services.orchestrator import run_sync
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (SUBSCRIPTION_SCRIPT_URL) and config/sync.yml
- Fetch rows from the web endpoint, or from a workbook export with --source
- Run the sync pipeline, optionally write records as JSON, print SUMMARY
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env via python-dotenv; failures only warn."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Spreadsheet -> subscription record sync")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to sync.yml")
    p.add_argument("--source", type=Path, help="Read rows from a .xlsx/.csv export instead of the web endpoint")
    p.add_argument("--sheet", help="Override the sheet name from config")
    p.add_argument("--output", type=Path, help="Write records as a JSON array to this file")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _write_records(path: Path, records: list[SubscriptionRecord]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.to_dict() for r in records]
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む ([] はテストからの明示的な空引数)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    if args.sheet:
        cfg = replace(cfg, sheet=args.sheet)

    source: RowSource
    if args.source is not None:
        source = WorkbookSource(args.source)
    else:
        try:
            source = SheetClient.from_config(cfg)
        except ConfigError as e:
            logger.error(f"config: {e}")
            return EXIT_FATAL

    logger.info(f"Syncing sheet '{cfg.sheet}' from: {source.source_name}")
    try:
        result = run_sync(cfg, source)
    except UpstreamUnavailable as e:
        logger.error(f"upstream: {e}")
        return EXIT_FATAL
    finally:
        if isinstance(source, SheetClient):
            source.close()

    if args.output is not None:
        _write_records(args.output, result.records)
        logger.info(f"wrote {result.record_count} records to {args.output}")

    # log_summary が "SUMMARY " を付与するので除去
    summary_line = render_summary_line(result)
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS

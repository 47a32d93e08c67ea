"""CLI entrypoint for decoding BIIS-XML valuation reports into GIF JSON."""

from __future__ import annotations

import argparse
import io
import json
import sys
from pathlib import Path

from biis_import.common.config_loader import load_plugin_config
from biis_import.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS
from biis_import.common.errors import BiisImportError
from biis_import.common.fs import write_json
from biis_import.common.http import HttpClient, is_http_url
from biis_import.common.ids import generate_run_id
from biis_import.common.logging import build_logger, log_event
from biis_import.host import ImportWorkerConfiguration
from biis_import.plugin import BiisXmlPlugin
from biis_import.read.decoder import DecodeResult, DecodeStatus


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=["decode"])
    parser.add_argument("--biis-file", required=True)
    parser.add_argument("--out", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--config-dir", default=None)
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-dir", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--strict", action="store_true")
    return parser.parse_args(argv)


def open_source(location: str, http_client: HttpClient | None = None):
    if is_http_url(location):
        client = http_client or HttpClient()
        try:
            return io.BytesIO(client.get_bytes(location))
        finally:
            if http_client is None:
                client.close()
    return Path(location).open("rb")


def build_payload(run_id: str, result: DecodeResult) -> dict:
    error = result.error
    return {
        "run_id": run_id,
        "status": result.status.value,
        "defaulted": [
            {"path": item.path, "field": item.field, "token": item.token} for item in result.defaulted
        ],
        "error": None
        if error is None
        else {"error_code": error.error_code, "message": str(error), "path": error.path, "token": error.token},
        "container": result.container.to_dict(),
    }


def run_command(args: argparse.Namespace, http_client: HttpClient | None = None) -> int:
    run_id = args.run_id or generate_run_id()
    config_dir = Path(args.config_dir) if args.config_dir else None
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    log_dir = Path(args.log_dir) if args.log_dir else None

    logger = build_logger(run_id, log_dir=log_dir, level=args.log_level)
    config = load_plugin_config(config_dir, overlay_config_dir=overlay_config_dir)
    plugin = BiisXmlPlugin(config, logger=logger)
    reader = plugin.get_import_plugin()

    stream = open_source(args.biis_file, http_client=http_client)
    try:
        reader.load(ImportWorkerConfiguration(streams={config.stream_parameter: stream}))
    finally:
        reader.unload()

    result = reader.result
    payload = build_payload(run_id, result)
    if args.out:
        write_json(Path(args.out), payload)
    else:
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n")
    log_event(logger, "output written", run_id=run_id, stage="output", event="OUTPUT", status=result.status.value)

    if result.status is DecodeStatus.FAILED:
        return EXIT_PARTIAL
    if args.strict and result.status is DecodeStatus.COMPLETE_WITH_DEFAULTS:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or sys.argv[1:])
    try:
        return run_command(args)
    except BiisImportError:
        return EXIT_HARD_FAIL
    except OSError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())

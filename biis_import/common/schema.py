"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

import codecs

from biis_import.common.errors import ConfigError
from biis_import.model.enums import Subset


def _assert_mapping(obj: object, ctx: str) -> dict:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    return obj


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_non_empty_strings(obj: dict, keys: set[str], ctx: str) -> None:
    for key in sorted(keys):
        value = obj[key]
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"{ctx}.{key} must be a non-empty string")


def validate_plugin_config(cfg: object, *, allow_unknown: bool = False) -> dict:
    sections = {
        "plugin": {"id", "name", "version", "model_version_prefix"},
        "meta": {"creator", "format", "version", "subset"},
        "reader": {"stream_parameter", "encoding"},
    }
    cfg = _assert_mapping(cfg, "plugin config")
    _assert_required_keys(cfg, set(sections), "plugin config")
    _assert_no_unknown_keys(cfg, set(sections), "plugin config", allow_unknown)

    for section, keys in sections.items():
        body = _assert_mapping(cfg[section], section)
        _assert_required_keys(body, keys, section)
        _assert_no_unknown_keys(body, keys, section, allow_unknown)
        _assert_non_empty_strings(body, keys, section)

    if cfg["meta"]["subset"] not in Subset.__members__:
        raise ConfigError(f"Unknown subset in meta.subset: {cfg['meta']['subset']}")

    try:
        codecs.lookup(cfg["reader"]["encoding"])
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding in reader.encoding: {cfg['reader']['encoding']}") from exc

    return cfg

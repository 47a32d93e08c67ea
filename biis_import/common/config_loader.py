"""Configuration loading and validation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from biis_import.common.constants import (
    META_CREATOR,
    META_FORMAT,
    META_SUBSET,
    META_VERSION,
    MODEL_VERSION_PREFIX,
    PLUGIN_ID,
    PLUGIN_NAME,
    PLUGIN_VERSION,
    STREAM_ENCODING,
    STREAM_PARAMETER,
)
from biis_import.common.errors import ConfigError
from biis_import.common.fs import read_yaml
from biis_import.common.schema import validate_plugin_config

CONFIG_FILENAME = "biis_xml.yml"

DEFAULT_PLUGIN_CONFIG = {
    "plugin": {
        "id": PLUGIN_ID,
        "name": PLUGIN_NAME,
        "version": PLUGIN_VERSION,
        "model_version_prefix": MODEL_VERSION_PREFIX,
    },
    "meta": {
        "creator": META_CREATOR,
        "format": META_FORMAT,
        "version": META_VERSION,
        "subset": META_SUBSET,
    },
    "reader": {
        "stream_parameter": STREAM_PARAMETER,
        "encoding": STREAM_ENCODING,
    },
}


@dataclass(frozen=True)
class PluginConfig:
    plugin_id: str
    plugin_name: str
    plugin_version: str
    model_version_prefix: str
    meta_creator: str
    meta_format: str
    meta_version: str
    meta_subset: str
    stream_parameter: str
    encoding: str

    @classmethod
    def from_mapping(cls, cfg: dict) -> "PluginConfig":
        return cls(
            plugin_id=cfg["plugin"]["id"],
            plugin_name=cfg["plugin"]["name"],
            plugin_version=str(cfg["plugin"]["version"]),
            model_version_prefix=cfg["plugin"]["model_version_prefix"],
            meta_creator=cfg["meta"]["creator"],
            meta_format=cfg["meta"]["format"],
            meta_version=str(cfg["meta"]["version"]),
            meta_subset=cfg["meta"]["subset"],
            stream_parameter=cfg["reader"]["stream_parameter"],
            encoding=cfg["reader"]["encoding"],
        )


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> Any:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    if not isinstance(overlay, dict):
        raise ConfigError(f"Overlay config must be a mapping: {overlay_path}")
    return _deep_merge(base, overlay)


def load_plugin_config(
    config_dir: Path | None = None,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> PluginConfig:
    if config_dir is None:
        cfg = copy.deepcopy(DEFAULT_PLUGIN_CONFIG)
    else:
        overlay_path = None
        if overlay_config_dir is not None:
            overlay_path = overlay_config_dir / CONFIG_FILENAME
        cfg = _load_yaml_with_overlay(config_dir / CONFIG_FILENAME, overlay_path)
    return PluginConfig.from_mapping(validate_plugin_config(cfg, allow_unknown=allow_unknown))

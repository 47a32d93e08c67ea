"""Plugin identity and capabilities advertised to the exchange host."""

from __future__ import annotations

import logging

from biis_import.common.config_loader import PluginConfig, load_plugin_config
from biis_import.read.reader import BiisXmlReader


class BiisXmlPlugin:
    def __init__(self, config: PluginConfig | None = None, logger: logging.Logger | None = None) -> None:
        self.config = config or load_plugin_config()
        self.logger = logger

    @property
    def plugin_id(self) -> str:
        return self.config.plugin_id

    @property
    def plugin_name(self) -> str:
        return self.config.plugin_name

    @property
    def plugin_version(self) -> str:
        return self.config.plugin_version

    def is_model_version_supported(self, version: str) -> bool:
        return version.startswith(self.config.model_version_prefix)

    def get_import_plugin(self) -> BiisXmlReader:
        return BiisXmlReader(self.config, logger=self.logger)

    def get_export_plugin(self) -> None:
        """Import-only: there is no BIIS-XML writer."""
        return None

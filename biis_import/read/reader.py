"""BIIS-XML import worker plugged into the exchange host."""

from __future__ import annotations

import logging
import time
from enum import Enum

from biis_import.common.config_loader import PluginConfig, load_plugin_config
from biis_import.common.errors import ReaderStateError, StreamError, UnsupportedOperationError
from biis_import.common.logging import log_event
from biis_import.host import ImportWorkerConfiguration, WorkerConfiguration
from biis_import.model.enums import Subset
from biis_import.model.nodes import Container
from biis_import.read.decoder import DecodeResult, DecodeStatus, decode, new_container

SUPPORTED_SUBSETS = (Subset.S5_7,)


class ReaderState(str, Enum):
    NOT_LOADED = "not_loaded"
    OPEN = "open"
    CLOSED = "closed"


class BiisXmlReader:
    """Import worker decoding one BIIS-XML stream per instance.

    ``load`` never raises for bad input: failures are logged and the
    partially built container stays available through ``container``.
    ``result`` carries the typed outcome of the decode.
    """

    def __init__(self, config: PluginConfig | None = None, logger: logging.Logger | None = None) -> None:
        self.config = config or load_plugin_config()
        self.logger = logger or logging.getLogger("biis_import.reader")
        self.state = ReaderState.NOT_LOADED
        self.result: DecodeResult | None = None
        self._stream = None

    def get_supported_subsets(self) -> list[Subset]:
        return list(SUPPORTED_SUBSETS)

    def get_required_configuration_arguments(self) -> ImportWorkerConfiguration:
        return ImportWorkerConfiguration(streams={self.config.stream_parameter: None})

    def get_config_gui(self) -> None:
        # Host falls back to its default configuration GUI.
        return None

    @property
    def container(self) -> Container | None:
        if self.result is None:
            return None
        return self.result.container

    def get_container(self) -> Container | None:
        return self.container

    def load(self, config: WorkerConfiguration) -> None:
        if not isinstance(config, ImportWorkerConfiguration):
            raise UnsupportedOperationError("not allowed: load requires an ImportWorkerConfiguration")
        if self.state is not ReaderState.NOT_LOADED:
            raise ReaderStateError(f"load called in state {self.state.value}")

        self.state = ReaderState.OPEN
        self._stream = config.streams.get(self.config.stream_parameter)
        started = time.monotonic()
        log_event(self.logger, "decode start", stage="decode", event="DECODE_START", status="ok")

        if self._stream is None:
            error = StreamError(f"Missing input stream: {self.config.stream_parameter}")
            self.result = DecodeResult(container=new_container(self.config), status=DecodeStatus.FAILED, error=error)
        else:
            self.result = decode(self._stream, config=self.config)

        duration_ms = int((time.monotonic() - started) * 1000)
        properties_out = len(self.result.container.maindata.properties)
        error = self.result.error
        if error is not None:
            log_event(
                self.logger,
                f"decode failed: {error}",
                level=logging.ERROR,
                stage="decode",
                event="DECODE_FAIL",
                status="error",
                path=error.path,
                token=error.token,
                duration_ms=duration_ms,
                properties_out=properties_out,
                error_code=error.error_code,
            )
            return

        for defaulted in self.result.defaulted:
            log_event(
                self.logger,
                f"unrecognised token for {defaulted.field}",
                level=logging.WARNING,
                stage="decode",
                event="TOKEN_DEFAULTED",
                status="partial",
                path=defaulted.path,
                token=defaulted.token,
            )
        log_event(
            self.logger,
            "decode end",
            stage="decode",
            event="DECODE_END",
            status="ok" if self.result.status is DecodeStatus.COMPLETE else "partial",
            duration_ms=duration_ms,
            properties_out=properties_out,
        )

    def unload(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None:
            try:
                stream.close()
            except (OSError, ValueError) as exc:
                log_event(
                    self.logger,
                    f"stream close failed: {exc}",
                    level=logging.DEBUG,
                    stage="unload",
                    event="UNLOAD",
                    status="error",
                )
        if self.state is ReaderState.OPEN:
            self.state = ReaderState.CLOSED
            log_event(self.logger, "stream released", stage="unload", event="UNLOAD", status="ok")

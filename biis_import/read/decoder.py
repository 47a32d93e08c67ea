"""Streaming decode of one BIIS-XML document into a GIF container."""

from __future__ import annotations

import codecs
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Mapping

from biis_import.common.config_loader import PluginConfig, load_plugin_config
from biis_import.common.errors import ConversionError, DecodeError, StreamError
from biis_import.model.enums import Subset
from biis_import.model.nodes import Container
from biis_import.read.assembler import RecordAssembler
from biis_import.read.converters import falls_back
from biis_import.read.dispatch import DISPATCH_TABLE, FieldMapping
from biis_import.read.path_tracker import PathTracker

CHUNK_SIZE = 64 * 1024


class DecodeStatus(str, Enum):
    COMPLETE = "complete"
    COMPLETE_WITH_DEFAULTS = "complete_with_defaults"
    FAILED = "failed"


@dataclass(frozen=True)
class DefaultedField:
    path: str
    field: str
    token: str


@dataclass
class DecodeResult:
    container: Container
    status: DecodeStatus
    defaulted: list[DefaultedField] = field(default_factory=list)
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.status is not DecodeStatus.FAILED


def new_container(config: PluginConfig) -> Container:
    container = Container()
    meta = container.meta
    meta.creator = config.meta_creator
    meta.process = Subset[config.meta_subset]
    meta.format = config.meta_format
    meta.version = config.meta_version
    return container


class _DecodePass:
    def __init__(self, container: Container, table: Mapping[str, FieldMapping]) -> None:
        self.table = table
        self.tracker = PathTracker()
        self.assembler = RecordAssembler(container)
        self.defaulted: list[DefaultedField] = []

    def handle(self, event: str, element: ET.Element) -> None:
        if event == "start":
            self.tracker.enter(element.tag)
            return
        path = self.tracker.current
        mapping = self.table.get(path)
        if mapping is not None and not mapping.is_noop:
            # Mapped paths are leaves.
            if len(element):
                raise StreamError(f"Unexpected child element in {path}", path=path, token=element.text)
            self.dispatch(path, mapping, element.text or "")
        self.tracker.exit()
        element.clear()

    def dispatch(self, path: str, mapping: FieldMapping, text: str) -> None:
        if mapping.skip_blank and not text.strip():
            return
        try:
            value = mapping.convert(text)
        except DecodeError as exc:
            exc.path = path
            raise
        except Exception as exc:
            raise ConversionError(f"Cannot convert {text!r}: {exc}", path=path, token=text) from exc
        if mapping.converter is not None and falls_back(mapping.converter, text):
            self.defaulted.append(DefaultedField(path=path, field=mapping.describe(), token=text))
        self.assembler.assign(mapping, value)


def decode(
    stream: IO,
    *,
    config: PluginConfig | None = None,
    table: Mapping[str, FieldMapping] | None = None,
) -> DecodeResult:
    """Decode ``stream`` in a single pass.

    Never raises for malformed input: stream and conversion failures come
    back as a ``FAILED`` result whose container holds everything assigned
    before the failing element.
    """
    config = config or load_plugin_config()
    container = new_container(config)
    decode_pass = _DecodePass(container, DISPATCH_TABLE if table is None else table)
    parser = ET.XMLPullParser(events=("start", "end"))
    text_decoder = codecs.getincrementaldecoder(config.encoding)()

    def _feed(chunk: str) -> None:
        parser.feed(chunk)
        for event, element in parser.read_events():
            decode_pass.handle(event, element)

    try:
        while True:
            chunk = stream.read(CHUNK_SIZE)
            if not chunk:
                break
            _feed(text_decoder.decode(chunk) if isinstance(chunk, bytes) else chunk)
        _feed(text_decoder.decode(b"", final=True))
        parser.close()
    except DecodeError as exc:
        return _failed(decode_pass, exc)
    except ET.ParseError as exc:
        return _failed(decode_pass, StreamError(f"Malformed XML: {exc}", path=decode_pass.tracker.current or None))
    except (OSError, UnicodeDecodeError) as exc:
        return _failed(decode_pass, StreamError(f"Cannot read stream: {exc}", path=decode_pass.tracker.current or None))

    decode_pass.assembler.commit()
    status = DecodeStatus.COMPLETE_WITH_DEFAULTS if decode_pass.defaulted else DecodeStatus.COMPLETE
    return DecodeResult(container=container, status=status, defaulted=decode_pass.defaulted)


def _failed(decode_pass: _DecodePass, error: DecodeError) -> DecodeResult:
    decode_pass.assembler.commit()
    return DecodeResult(
        container=decode_pass.assembler.container,
        status=DecodeStatus.FAILED,
        defaulted=decode_pass.defaulted,
        error=error,
    )

from __future__ import annotations

import io
from xml.sax.saxutils import escape

import pytest


def build_document(*leaves: tuple[str, str]) -> bytes:
    """Nest ``(path, text)`` leaves into one BIIS-XML document, in order.

    Consecutive leaves sharing ancestors share the open elements.
    """
    parts = ['<?xml version="1.0" encoding="UTF-8"?>']
    open_names: list[str] = []
    for path, text in leaves:
        names = path.split("/")
        parents, leaf = names[:-1], names[-1]
        common = 0
        while common < min(len(open_names), len(parents)) and open_names[common] == parents[common]:
            common += 1
        while len(open_names) > common:
            parts.append(f"</{open_names.pop()}>")
        for name in parents[common:]:
            parts.append(f"<{name}>")
            open_names.append(name)
        parts.append(f"<{leaf}>{escape(text)}</{leaf}>")
    while open_names:
        parts.append(f"</{open_names.pop()}>")
    return "".join(parts).encode("utf-8")


@pytest.fixture
def document_stream():
    def _factory(*leaves: tuple[str, str]) -> io.BytesIO:
        return io.BytesIO(build_document(*leaves))

    return _factory

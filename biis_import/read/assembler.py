"""In-progress record for one decode pass."""

from __future__ import annotations

from typing import Any

from biis_import.model.nodes import Address, Container, Property, Valuation
from biis_import.read.dispatch import FieldMapping


class RecordAssembler:
    """Owns one Property/Valuation/Address triple until ``commit``.

    A document carries a single record, so repeated paths overwrite the
    same fields; nothing is merged.
    """

    def __init__(self, container: Container) -> None:
        self.container = container
        self.property = Property()
        self.address = Address()
        self.valuation = Valuation(address=self.address)
        self.committed = False

    def _target(self, name: str) -> Any:
        if name == "meta":
            return self.container.meta
        if name == "property":
            return self.property
        if name == "valuation":
            return self.valuation
        if name == "address":
            return self.address
        raise ValueError(f"Unknown assignment target: {name}")

    def assign(self, mapping: FieldMapping, value: Any) -> None:
        for target, field_name in mapping.targets:
            setattr(self._target(target), field_name, value)

    def commit(self) -> Property:
        object_id = self.property.object_id_sender
        self.property.valuations[object_id] = self.valuation
        self.container.maindata.properties[object_id] = self.property
        self.committed = True
        return self.property

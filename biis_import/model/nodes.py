"""GIF container model: Container, Meta, Data, Property, Valuation, Address."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from biis_import.model.enums import (
    AreaMeasurement,
    ConstructionPhase,
    Country,
    InteriorQuality,
    ObjectCondition,
    OwnershipType,
    RetailLocationType,
    Subset,
    UseType,
    ValuationType1,
    ValuationType2,
)


def _to_primitive(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): _to_primitive(item) for key, item in value.items()}
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class _Node:
    def to_dict(self) -> dict[str, Any]:
        return {f.name: _to_primitive(getattr(self, f.name)) for f in fields(self)}


@dataclass
class Address(_Node):
    street: str | None = None
    zip: str | None = None
    city: str | None = None
    country: Country | None = None
    label: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None


@dataclass
class Valuation(_Node):
    expert_id: str | None = None
    expert_name: str | None = None
    owner: str | None = None
    currency: str | None = None
    area_measurement: AreaMeasurement | None = None
    use_type_primary_share: Decimal | None = None
    use_type_secondary_share: Decimal | None = None
    ground_lease: bool | None = None
    maintenance_backlog: bool | None = None
    single_tenant: bool | None = None
    exchange_rate_date: date | None = None
    valid_from: date | None = None
    change_date_for_remaining_economic_life: date | None = None
    purchase_date: date | None = None
    sale_date: date | None = None
    construction_date: date | None = None
    construction_phase: ConstructionPhase | None = None
    use_type_primary: UseType | None = None
    use_type_secondary: UseType | None = None
    interior_quality: InteriorQuality | None = None
    retail_location: RetailLocationType | None = None
    ownership_type: OwnershipType | None = None
    condition: ObjectCondition | None = None
    valuation_type1: ValuationType1 | None = None
    valuation_type2: ValuationType2 | None = None
    floor_description: str | None = None
    ground_lease_remarks: str | None = None
    note: str | None = None
    address: Address | None = None


@dataclass
class Property(_Node):
    object_id_sender: str | None = None
    object_id_receiver: str | None = None
    label: str | None = None
    valuations: dict[str | None, Valuation] = field(default_factory=dict)


@dataclass
class Data(_Node):
    properties: dict[str | None, Property] = field(default_factory=dict)


@dataclass
class Meta(_Node):
    creator: str | None = None
    process: Subset | None = None
    format: str | None = None
    version: str | None = None
    created: datetime | None = None


@dataclass
class Container(_Node):
    meta: Meta = field(default_factory=Meta)
    maindata: Data = field(default_factory=Data)

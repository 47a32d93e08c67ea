"""Dispatch table: canonical BIIS element path to field assignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from biis_import.read import converters as conv

ROOT = "ValXML"
GENERAL = f"{ROOT}/BIISValuationData/General"
ADDRESS = f"{GENERAL}/Address"
RESULTS = f"{ROOT}/BIISValuationData/ValuationResults"

TARGETS = ("meta", "property", "valuation", "address")


@dataclass(frozen=True)
class FieldMapping:
    """One dispatch action.

    ``targets`` lists ``(target, field)`` pairs that all receive the same
    value; an empty tuple marks a path that is observed and discarded.
    """

    targets: tuple[tuple[str, str], ...]
    converter: Callable[[str | None], Any] | None = None
    skip_blank: bool = False

    @property
    def is_noop(self) -> bool:
        return not self.targets

    def convert(self, text: str) -> Any:
        if self.converter is None:
            return text
        return self.converter(text)

    def describe(self) -> str:
        return ",".join(f"{target}.{name}" for target, name in self.targets)


def _to(target: str, name: str, converter=None, *, skip_blank: bool = False) -> FieldMapping:
    return FieldMapping(((target, name),), converter, skip_blank)


IGNORE = FieldMapping(())

DISPATCH_TABLE: Mapping[str, FieldMapping] = {
    # Superseded by ValuationResults/DateOfAppraisal.
    f"{ROOT}/Date": IGNORE,
    f"{ROOT}/CompletionDate": _to("meta", "created", conv.convert_datetime),
    f"{ROOT}/DataSupplier/Short": _to("valuation", "expert_id"),
    f"{ROOT}/DataSupplier/Name": _to("valuation", "expert_name"),
    f"{GENERAL}/ArealUnit": _to("valuation", "area_measurement", conv.convert_area_measurement),
    f"{ADDRESS}/Street": _to("address", "street"),
    f"{ADDRESS}/PostCode": _to("address", "zip"),
    f"{ADDRESS}/Town": _to("address", "city"),
    f"{ADDRESS}/Country": _to("address", "country", conv.convert_country, skip_blank=True),
    f"{ADDRESS}/Text": FieldMapping((("address", "label"), ("property", "label"))),
    f"{GENERAL}/Owner": _to("valuation", "owner"),
    f"{GENERAL}/ObjNoOwner": FieldMapping((("property", "object_id_sender"), ("property", "object_id_receiver"))),
    f"{GENERAL}/ObjKoWGS84Longitude": _to("address", "longitude", conv.convert_decimal),
    f"{GENERAL}/ObjKoWGS84Latitude": _to("address", "latitude", conv.convert_decimal),
    f"{RESULTS}/Currency": _to("valuation", "currency", conv.convert_currency),
    f"{RESULTS}/ShareAncillaryTypeOfUse": _to("valuation", "use_type_secondary_share", conv.convert_decimal),
    f"{RESULTS}/ShareMainTypeOfUse": _to("valuation", "use_type_primary_share", conv.convert_decimal),
    f"{RESULTS}/GroundLease": _to("valuation", "ground_lease", conv.convert_boolean),
    f"{RESULTS}/MaintenanceBacklog": _to("valuation", "maintenance_backlog", conv.convert_boolean),
    f"{RESULTS}/SingleTenant": _to("valuation", "single_tenant", conv.convert_boolean),
    f"{RESULTS}/DateExchangeRate": _to("valuation", "exchange_rate_date", conv.convert_date),
    f"{RESULTS}/DateOfAppraisal": _to("valuation", "valid_from", conv.convert_date),
    f"{RESULTS}/DateOfChangeForRemainingEconomicLife": _to(
        "valuation", "change_date_for_remaining_economic_life", conv.convert_date
    ),
    f"{RESULTS}/DateOfPurchase": _to("valuation", "purchase_date", conv.convert_date),
    f"{RESULTS}/DateOfSale": _to("valuation", "sale_date", conv.convert_date),
    f"{RESULTS}/OriginalYearOfConstruction": _to("valuation", "construction_date", conv.convert_date),
    f"{RESULTS}/AncillaryTypeOfUse": _to("valuation", "use_type_secondary", conv.convert_use_type),
    f"{RESULTS}/MainTypeOfUse": _to("valuation", "use_type_primary", conv.convert_use_type),
    f"{RESULTS}/FitOutQuality": _to("valuation", "interior_quality", conv.convert_interior_quality),
    f"{RESULTS}/Floors": _to("valuation", "floor_description"),
    f"{RESULTS}/GroundLeaseRemarks": _to("valuation", "ground_lease_remarks"),
    f"{RESULTS}/LocationQuality": _to("valuation", "retail_location", conv.convert_retail_location),
    f"{RESULTS}/QualityDateOfAppraisal": IGNORE,
    f"{RESULTS}/RebaseObjAdditionalInformation": _to("valuation", "note"),
    f"{RESULTS}/RebaseType1": _to("valuation", "valuation_type1", conv.convert_valuation_type1),
    f"{RESULTS}/RebaseType2": _to("valuation", "valuation_type2", conv.convert_valuation_type2),
    f"{RESULTS}/StateOfCompletion": _to("valuation", "construction_phase", conv.convert_construction_phase),
    f"{RESULTS}/StructuralCondition": _to("valuation", "condition", conv.convert_condition),
    f"{RESULTS}/TypeOfOwnership": _to("valuation", "ownership_type", conv.convert_ownership_type),
}


def build_dispatch_table(extra: Mapping[str, FieldMapping] | None = None) -> dict[str, FieldMapping]:
    """Return the built-in table extended (or overridden) by ``extra``."""
    table = dict(DISPATCH_TABLE)
    if extra:
        for path, mapping in extra.items():
            unknown = {target for target, _name in mapping.targets} - set(TARGETS)
            if unknown:
                raise ValueError(f"Unknown dispatch target(s) for {path}: {', '.join(sorted(unknown))}")
            table[path] = mapping
    return table

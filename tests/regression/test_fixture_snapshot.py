from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

import pytest

from biis_import.host import ImportWorkerConfiguration
from biis_import.model.enums import AreaMeasurement, ConstructionPhase, Country, UseType, ValuationType1, ValuationType2
from biis_import.plugin import BiisXmlPlugin
from biis_import.read.dispatch import ADDRESS, GENERAL, RESULTS, ROOT


def _load(stream):
    reader = BiisXmlPlugin().get_import_plugin()
    try:
        reader.load(ImportWorkerConfiguration(streams={"biis-file": stream}))
    finally:
        reader.unload()
    return reader


@pytest.mark.regression
def test_end_to_end_scenario(document_stream):
    reader = _load(
        document_stream(
            (f"{ROOT}/CompletionDate", "2016-03-01T10:00:00"),
            (f"{ROOT}/DataSupplier/Short", "EXP1"),
            (f"{ADDRESS}/Street", "Main St"),
            (f"{ADDRESS}/PostCode", "12345"),
            (f"{ADDRESS}/Town", "Berlin"),
            (f"{ADDRESS}/Country", "DE"),
            (f"{GENERAL}/ObjNoOwner", "OBJ-001"),
            (f"{RESULTS}/Currency", "EUR"),
            (f"{RESULTS}/MainTypeOfUse", "Wohnen"),
            (f"{RESULTS}/FitOutQuality", "E"),
        )
    )

    container = reader.container
    assert container.meta.created == datetime(2016, 3, 1, 10, 0, 0)
    assert list(container.maindata.properties) == ["OBJ-001"]
    prop = container.maindata.properties["OBJ-001"]
    assert list(prop.valuations) == ["OBJ-001"]
    valuation = prop.valuations["OBJ-001"]
    assert valuation.expert_id == "EXP1"
    assert valuation.address.city == "Berlin"
    assert valuation.address.country is Country.DE
    assert valuation.currency == "EUR"
    assert valuation.use_type_primary is UseType.RESIDENTIAL
    assert valuation.interior_quality is None


@pytest.mark.regression
def test_full_fixture_document():
    with Path("tests/fixtures/biis/valuation_report.xml").open("rb") as stream:
        reader = _load(stream)

    assert reader.result.ok
    prop = reader.container.maindata.properties["OBJ-001"]
    assert prop.object_id_receiver == "OBJ-001"
    assert prop.label == "Office block Main St"
    valuation = prop.valuations["OBJ-001"]
    assert valuation.expert_name == "Example Appraisal GmbH"
    assert valuation.owner == "Example Fund KVG"
    assert valuation.area_measurement is AreaMeasurement.SQM
    assert valuation.address.latitude == Decimal("52.520008")
    assert valuation.address.longitude == Decimal("13.404954")
    assert valuation.use_type_primary_share == Decimal("80.5")
    assert valuation.use_type_secondary is UseType.PARKING
    assert valuation.ground_lease is False
    assert valuation.maintenance_backlog is True
    assert valuation.single_tenant is True
    assert valuation.valid_from == date(2016, 2, 28)
    assert valuation.construction_date == date(1985, 1, 1)
    assert valuation.construction_phase is ConstructionPhase.COMPLETED
    assert valuation.valuation_type1 is ValuationType1.FUND
    assert valuation.valuation_type2 is ValuationType2.REVALUATION
    assert valuation.note == "Refurbished 2012"
    assert valuation.sale_date is None


@pytest.mark.regression
def test_second_object_number_overwrites_first(document_stream):
    reader = _load(
        document_stream(
            (f"{GENERAL}/ObjNoOwner", "OBJ-A"),
            (f"{ROOT}/Header/BIISValuationData/General/ObjNoOwner", "OBJ-IGNORED"),
            (f"{GENERAL}/ObjNoOwner", "OBJ-B"),
        )
    )

    assert reader.result.ok
    assert list(reader.container.maindata.properties) == ["OBJ-B"]
    assert reader.container.maindata.properties["OBJ-B"].object_id_sender == "OBJ-B"


@pytest.mark.regression
def test_malformed_date_stops_decode_and_is_only_logged(document_stream, caplog):
    with caplog.at_level(logging.INFO, logger="biis_import.reader"):
        reader = _load(
            document_stream(
                (f"{ROOT}/DataSupplier/Short", "EXP1"),
                (f"{GENERAL}/ObjNoOwner", "OBJ-001"),
                (f"{RESULTS}/DateOfAppraisal", "28.02.2016"),
                (f"{RESULTS}/Currency", "EUR"),
                (f"{RESULTS}/MainTypeOfUse", "Wohnen"),
            )
        )

    valuation = reader.container.maindata.properties["OBJ-001"].valuations["OBJ-001"]
    assert valuation.expert_id == "EXP1"
    assert valuation.valid_from is None
    assert valuation.currency is None
    assert valuation.use_type_primary is None
    failures = [record for record in caplog.records if getattr(record, "event", None) == "DECODE_FAIL"]
    assert len(failures) == 1
    assert failures[0].path == f"{RESULTS}/DateOfAppraisal"
    assert failures[0].token == "28.02.2016"

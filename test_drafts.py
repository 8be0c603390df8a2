#!/usr/bin/env python3
"""
Tests for flattening estimates into draft records and storing them.
"""

import sys
sys.path.insert(0, 'src')

import json

from estimator.aggregator import estimate_proposal
from estimator.calculator import ServiceCalculator
from estimator.drafts import build_draft_record
from estimator.models import ServiceSelection
from api.draft_store import DraftStore


def build(sample_catalog, selections, client_name="Jordan Lee", address="12 Elm St, Austin, TX"):
    estimate = estimate_proposal(
        selections,
        address=address,
        calculator=ServiceCalculator(sample_catalog)
    )
    return build_draft_record(client_name, address, selections, estimate)


def test_single_service_draft(sample_catalog):
    selections = [
        ServiceSelection(
            "a", "painting", "single-room",
            footage=None,
            options={"ceilings": True, "grade": "premium"}
        ),
    ]
    record = build(sample_catalog, selections)

    assert record.client_name == "Jordan Lee"
    assert record.trade_id == "painting"
    assert record.job_type_id == "single-room"
    assert record.job_type_name == "Single Room (Interior)"
    assert record.job_size == 2
    # Choice values are dropped from the primary record
    assert record.options == {"ceilings": True}
    assert record.status == "draft"
    assert record.is_unlocked is True
    assert record.is_multi_service is False
    assert record.line_items is None
    assert record.is_draft_without_client_info is False


def test_multi_service_draft(sample_catalog):
    selections = [
        ServiceSelection("a", "painting", "single-room", job_size=3, area_key="living-room"),
        ServiceSelection("b", "masonry", "chimney"),
        ServiceSelection("c", "plumbing", "repipe", options={"fast-track": True}),
    ]
    record = build(sample_catalog, selections, address="Somewhere")

    assert record.is_multi_service is True
    assert record.job_type_name == "Multi-Service (2 services)"
    assert record.trade_id == "painting"
    assert record.job_size == 3
    assert [row.id for row in record.line_items] == ["a", "c"]
    assert record.line_items[0].area_key == "living-room"
    assert record.line_items[1].options == {"fast-track": True}
    # 600 + 8000 and 1100 + 15000
    assert record.price_low == 8600
    assert record.price_high == 16100
    assert record.estimated_days_low == 2 + 3
    assert record.estimated_days_high == 3 + 5
    assert record.scope == ["Protect floors.", "Apply two coats.", "Install PEX supply lines."]


def test_placeholders_for_missing_client_info(sample_catalog):
    selections = [ServiceSelection("a", "painting", "trim")]
    record = build(sample_catalog, selections, client_name="  ", address=None)

    assert record.client_name == "Draft Proposal"
    assert record.address == "Address pending"
    assert record.is_draft_without_client_info is True


def test_no_priced_service_gives_no_record(sample_catalog):
    assert build(sample_catalog, [ServiceSelection("a")]) is None


def test_file_store_round_trip(sample_catalog, tmp_path):
    data_file = tmp_path / "drafts.json"
    store = DraftStore(str(data_file))
    record = build(sample_catalog, [ServiceSelection("a", "painting", "trim")], address="Somewhere")

    saved = store.save_draft(record.to_dict())
    assert saved["id"]
    assert store.get_draft(saved["id"])["job_type_id"] == "trim"

    # A new store reads what the first one wrote
    reloaded = DraftStore(str(data_file))
    assert reloaded.get_draft(saved["id"])["price_low"] == 1000
    assert saved["id"] in json.loads(data_file.read_text())


def test_file_store_ignores_unreadable_file(tmp_path):
    data_file = tmp_path / "drafts.json"
    data_file.write_text("not json")

    store = DraftStore(str(data_file))
    assert store.get_draft("missing") is None

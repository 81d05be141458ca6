"""Tests for the merge engine."""

from datetime import UTC, datetime

import pytest

from property_reconciler.config import SourceName
from property_reconciler.merge import (
    MERGED_SOURCE,
    FieldPrecedence,
    MergeEngine,
    MergePolicy,
)
from property_reconciler.models.property import (
    Document,
    Encumbrance,
    PropertyDetails,
    PropertyOwner,
    StandardPropertyRecord,
)


@pytest.fixture
def engine(resolver):
    return MergeEngine(resolver)


class TestMergeFixture:
    """Merging the three-portal MH1234567 property."""

    def test_lists_are_deduplicated(self, engine):
        record = engine.merge("MH1234567")
        assert record.data_source == MERGED_SOURCE
        assert record.property_id == "MH1234567"
        assert len(record.owner_details) == 2
        assert len(record.encumbrances) == 1
        assert record.encumbrances[0].holder == "State Bank of India"
        assert record.encumbrances[0].date_created == "2022-01-15"
        assert len(record.transaction_history) == 3
        assert {d.number for d in record.documents} == {
            "SD/MH/2022/12345",
            "PC/MUM/BW/45678",
            "MUT/MH/2022/0789",
        }

    def test_latest_timestamp_wins(self, engine):
        record = engine.merge("MH1234567")
        assert record.last_updated == datetime(2023, 3, 1, 8, 0, tzinfo=UTC)

    def test_details_are_first_wins_and_filled(self, engine):
        details = engine.merge("MH1234567").property_details
        assert details.address == "123, Pali Hill, Bandra West, Mumbai - 400050"
        assert details.area == "1200"
        assert details.area_unit == "SQ_FT"
        assert details.survey_number == "123/4A"
        assert details.boundaries.north == "Pali Hill Road"

    def test_provenance(self, engine):
        result = engine.merge_with_provenance("MH1234567")
        assert result.sources == ["DORIS", "DLR", "CERSAI"]

    def test_merge_from_any_member_id(self, engine):
        a = engine.merge("MH1234567")
        b = engine.merge("CERSAI123456")
        assert a.model_dump(exclude={"property_id"}) == b.model_dump(exclude={"property_id"})
        assert b.property_id == "CERSAI123456"

    def test_merge_is_idempotent(self, engine):
        first = engine.merge("MH1234567")
        second = engine.merge("MH1234567")
        assert first.model_dump() == second.model_dump()


class TestCorporateHoldings:
    """MCA21 contributes through company property holdings."""

    def test_corporate_owner_deduplicated_by_cin(self, engine):
        result = engine.merge_with_provenance("MH7654321")
        assert result.sources == ["DORIS", "DLR", "MCA21"]
        assert len(result.record.owner_details) == 1
        assert result.record.owner_details[0].identification_number == "U12345MH2010PLC123456"
        assert result.record.last_updated == datetime(2023, 4, 1, 10, 0, tzinfo=UTC)

    def test_cin_resolves_to_first_held_property(self, engine):
        result = engine.merge_with_provenance("L67890KA2015PLC654321")
        assert result.sources == ["DLR", "MCA21"]
        assert len(result.record.encumbrances) == 1
        assert result.record.encumbrances[0].holder == "Axis Bank"
        assert result.record.registration_number == "REG/KA/2021/11223"

    def test_only_the_mapped_company_is_consulted(self, engine):
        """DL9876543 is held by a company but has no cross-reference entry."""
        result = engine.merge_with_provenance("DL9876543")
        assert result.record is None
        assert result.sources == []

    def test_four_source_property(self, engine):
        result = engine.merge_with_provenance("DL8765432")
        assert result.sources == ["DORIS", "DLR", "CERSAI", "MCA21"]
        assert len(result.record.encumbrances) == 1
        assert len(result.record.owner_details) == 2


class TestIncludeFilter:
    def test_unknown_names_are_ignored(self, engine):
        result = engine.merge_with_provenance("MH1234567", include=["doris", "land"])
        assert result.sources == ["DORIS"]

    def test_subset_of_sources(self, engine):
        result = engine.merge_with_provenance("MH1234567", include=["dlr", SourceName.CERSAI])
        assert result.sources == ["DLR", "CERSAI"]
        assert result.record.property_details.area == "111.48"

    def test_include_order_does_not_matter(self, engine):
        a = engine.merge("MH1234567", include=["cersai", "doris"])
        b = engine.merge("MH1234567", include=["doris", "cersai"])
        assert a.model_dump() == b.model_dump()

    def test_no_contributors(self, engine):
        result = engine.merge_with_provenance("MH1234567", include=["mca21"])
        assert result.record is None
        assert result.sources == []


class TestTransformFailure:
    def test_bad_source_is_skipped(self, datasets, resolver):
        datasets.dlr["MH1234567"]["ownerDetails"] = [{"identificationNumber": "broken"}]
        result = MergeEngine(resolver).merge_with_provenance("MH1234567")
        assert result.sources == ["DORIS", "CERSAI"]
        assert result.record.property_details.survey_number is None


class TestMergePolicy:
    """Configurable precedence."""

    def test_last_wins_details(self, resolver):
        policy = MergePolicy(scalar=FieldPrecedence.LAST_WINS, details=FieldPrecedence.LAST_WINS)
        record = MergeEngine(resolver, policy=policy).merge("MH1234567", include=["doris", "dlr"])
        assert record.property_details.area == "111.48"
        assert record.property_details.area_unit == "SQ_M"
        # Only DORIS has coordinates; last-wins never erases a value with None
        assert record.property_details.coordinates is not None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"scalar": FieldPrecedence.MAX},
            {"details": FieldPrecedence.UNION_DEDUP},
            {"lists": FieldPrecedence.FIRST_WINS},
            {"timestamp": FieldPrecedence.LAST_WINS},
        ],
    )
    def test_invalid_rules(self, kwargs):
        with pytest.raises(ValueError):
            MergePolicy(**kwargs)


class TestMergeRecords:
    """Folding hand-built records."""

    def test_empty(self, engine):
        assert engine.merge_records([]) is None

    def test_keyless_items_dedup_exactly(self, engine):
        owner = PropertyOwner(name="Anon")
        a = StandardPropertyRecord(owner_details=[owner], data_source="DORIS")
        b = StandardPropertyRecord(
            owner_details=[PropertyOwner(name="Anon"), PropertyOwner(name="Other")],
            data_source="DLR",
        )
        merged = engine.merge_records([a, b])
        assert [o.name for o in merged.owner_details] == ["Anon", "Other"]
        assert merged.property_id is None

    def test_first_registration_number_kept(self, engine):
        a = StandardPropertyRecord(registration_number="REG/MH/2022/00001")
        b = StandardPropertyRecord(registration_number="REG/MH/2022/00002")
        assert engine.merge_records([a, b]).registration_number == "REG/MH/2022/00001"

    def test_naive_and_aware_timestamps_compare(self, engine):
        a = StandardPropertyRecord(last_updated=datetime(2023, 1, 1, tzinfo=UTC))
        b = StandardPropertyRecord(last_updated=datetime(2023, 6, 1))
        assert engine.merge_records([a, b]).last_updated == datetime(2023, 6, 1)

    def test_inputs_are_not_mutated(self, engine):
        details = PropertyDetails(address="A")
        a = StandardPropertyRecord(
            property_details=details,
            encumbrances=[Encumbrance(type="LIEN", holder="X", date_created="2020-01-01", status="ACTIVE")],
            documents=[Document(type="DEED", number="1", issued_date="2020-01-01", issued_by="SRO")],
        )
        b = StandardPropertyRecord(property_details=PropertyDetails(area="10"))
        merged = engine.merge_records([a, b])
        merged.property_details.area = "99"
        merged.encumbrances.append(merged.encumbrances[0])
        assert details.area is None
        assert len(a.encumbrances) == 1

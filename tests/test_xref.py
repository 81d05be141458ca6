"""Tests for the identifier cross-reference resolver."""

import pytest

from property_reconciler.config import SourceName
from property_reconciler.xref import (
    DEFAULT_EQUIVALENCE_CLASSES,
    CrossReferenceResolver,
    infer_source,
)


class TestInferSource:
    """Shape-based source guessing."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("CERSAI123456", SourceName.CERSAI),
            ("U12345MH2010PLC123456", SourceName.MCA21),
            ("L67890KA2015PLC654321", SourceName.MCA21),
            ("MH1234567", SourceName.DORIS),
            ("DL8765432", SourceName.DORIS),
            ("KA9876543", SourceName.DLR),
            ("TN5544332", SourceName.DLR),
            ("ZZ0000000", SourceName.DORIS),
        ],
    )
    def test_infer(self, identifier, expected):
        assert infer_source(identifier) is expected


class TestResolveInSource:
    """Point lookups."""

    def test_cersai_to_dlr(self, resolver):
        assert resolver.resolve_in_source("CERSAI123456", SourceName.DLR) == "MH1234567"

    def test_accepts_string_source(self, resolver):
        assert resolver.resolve_in_source("MH7654321", "mca21") == "U12345MH2010PLC123456"

    def test_unmapped_returns_none(self, resolver):
        assert resolver.resolve_in_source("ZZ0000000", SourceName.DLR) is None

    def test_absent_source_returns_none(self, resolver):
        assert resolver.resolve_in_source("KA9876543", SourceName.DORIS) is None

    def test_cin_in_several_classes_searches_all(self, resolver):
        """A company holding two properties maps to CERSAI via its second class."""
        assert resolver.resolve_in_source("L67890KA2015PLC654321", SourceName.CERSAI) == "CERSAI901234"
        assert resolver.resolve_in_source("L67890KA2015PLC654321", SourceName.DLR) == "KA1122334"

    def test_symmetry_over_every_class(self, resolver, datasets):
        """Every member resolves to every other member, and each mapped id exists in its dataset."""
        for members in DEFAULT_EQUIVALENCE_CLASSES:
            for source_a, id_a in members.items():
                assert datasets.has(source_a, id_a), f"{id_a} missing from {source_a.label}"
                for source_b, id_b in members.items():
                    resolved = resolver.resolve_in_source(id_a, source_b)
                    assert resolved is not None
                    assert datasets.has(source_b, resolved)
                    if len(resolver.classes_for(id_a)) == 1:
                        assert resolved == id_b


class TestResolveAll:
    """Full mappings."""

    def test_four_way_mapping(self, resolver):
        mapping = resolver.resolve_all("CERSAI345678")
        assert mapping == {
            SourceName.DORIS: "DL8765432",
            SourceName.DLR: "DL8765432",
            SourceName.CERSAI: "CERSAI345678",
            SourceName.MCA21: "U98765DL2012PLC987654",
        }

    def test_keys_follow_fixed_order(self, resolver):
        assert list(resolver.resolve_all("MH7654321")) == [SourceName.DORIS, SourceName.DLR, SourceName.MCA21]

    def test_multi_class_id_uses_first_class(self, resolver):
        assert resolver.resolve_all("L67890KA2015PLC654321") == {
            SourceName.DLR: "KA1122334",
            SourceName.MCA21: "L67890KA2015PLC654321",
        }

    def test_unmapped_id_falls_back_to_inferred_source(self, resolver):
        assert resolver.resolve_all("ZZ0000000") == {SourceName.DORIS: "ZZ0000000"}
        assert resolver.resolve_all("CERSAI000000") == {SourceName.CERSAI: "CERSAI000000"}


class TestExistsInSource:
    def test_present(self, resolver):
        assert resolver.exists_in_source("CERSAI789012", SourceName.DLR) is True

    def test_mapped_but_absent(self, datasets):
        resolver = CrossReferenceResolver(
            classes=[{"doris": "MH0000001", "dlr": "MH0000002"}],
            datasets=datasets,
        )
        assert resolver.exists_in_source("MH0000001", SourceName.DLR) is False

    def test_unmapped(self, resolver):
        assert resolver.exists_in_source("ZZ0000000", SourceName.CERSAI) is False


class TestCustomClasses:
    """Resolver built from an explicit table."""

    def test_add_class_extends_lookup(self, resolver):
        count = len(resolver)
        resolver.add_class({"doris": "GJ1000001", "cersai": "CERSAI000111"})
        assert len(resolver) == count + 1
        assert resolver.resolve_in_source("CERSAI000111", "doris") == "GJ1000001"

    def test_empty_members_ignored(self, resolver):
        count = len(resolver)
        resolver.add_class({"doris": "", "dlr": None})
        assert len(resolver) == count

    def test_unknown_source_name_rejected(self):
        with pytest.raises(ValueError):
            CrossReferenceResolver(classes=[{"land_registry": "X1"}])


class TestMergeAcrossSources:
    def test_delegates_to_merge_engine(self, resolver):
        record = resolver.merge_across_sources("CERSAI123456")
        assert record is not None
        assert record.data_source == "MERGED"
        assert record.property_id == "CERSAI123456"

    def test_unknown_include_name_does_not_raise(self, resolver):
        record = resolver.merge_across_sources("MH1234567", include=["dlr", "nowhere"])
        assert record is not None
        assert record.property_details.survey_number == "123/4A"

    def test_unknown_identifier(self, resolver):
        assert resolver.merge_across_sources("ZZ0000000") is None

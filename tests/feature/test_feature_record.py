import pytest
from Bio.SeqFeature import CompoundLocation, SeqFeature, SimpleLocation

from seqfeatures.exc import MultiValueQualifierWarning, ReservedQualifierWarning, UnsupportedOperationException
from seqfeatures.feature import FeatureRecord, NO_ATTRIBUTE_SET, SequenceFeature, UNSET_SCORE
from seqfeatures.location.range import Range, StrandedRange
from seqfeatures.location.strand import Strand


class TestFeatureRecord:
    def test_default(self):
        feature = FeatureRecord()
        assert feature.feature_id == ""
        assert feature.sequence_id == ""
        assert feature.source == ""
        assert feature.feature_type == ""
        assert feature.range == StrandedRange(0, 0, ".")
        assert feature.score == UNSET_SCORE
        assert not feature.has_score
        assert feature.is_empty
        assert feature.get_attribute_list() == set()

    def test_construction(self, gene_a):
        assert isinstance(gene_a, SequenceFeature)
        assert gene_a.id == gene_a.feature_id == "gene1"
        assert gene_a.sequence_id == "chrA"
        assert gene_a.source == "annotator"
        assert gene_a.type == gene_a.feature_type == "gene"
        assert (gene_a.start, gene_a.end) == (10, 20)
        assert gene_a.strand is Strand.PLUS
        assert gene_a.score == 3.5
        assert gene_a.has_score

    def test_setters(self, gene_a):
        gene_a.id = "gene9"
        gene_a.type = "pseudogene"
        gene_a.sequence_id = "chrZ"
        gene_a.source = "curator"
        gene_a.score = 0.1
        assert gene_a.feature_id == "gene9"
        assert gene_a.feature_type == "pseudogene"
        assert (gene_a.sequence_id, gene_a.source, gene_a.score) == ("chrZ", "curator", 0.1)

    @pytest.mark.parametrize(
        "start,end,size,is_empty,is_point",
        [
            (12, 12, 0, True, False),
            (12, 13, 1, False, True),
            (12, 20, 8, False, False),
        ],
    )
    def test_size(self, start, end, size, is_empty, is_point):
        feature = FeatureRecord("f", "chr", "src", "site", start, end, "+")
        assert feature.size == size == len(feature)
        assert feature.is_empty is is_empty
        assert feature.is_point is is_point

    def test_strand_normalization(self):
        feature = FeatureRecord("f", "chr", "src", "site", 0, 10, "x")
        assert feature.strand is Strand.UNSTRANDED
        assert not feature.is_stranded
        assert not feature.is_negative_strand

    @pytest.mark.parametrize("strand", ["+", "-"])
    def test_invert_twice(self, strand):
        feature = FeatureRecord("f", "chr", "src", "site", 0, 10, strand)
        feature.invert()
        assert feature.strand is Strand.from_symbol(strand).reverse()
        assert feature.is_stranded
        feature.invert()
        assert feature.strand is Strand.from_symbol(strand)

    @pytest.mark.parametrize("strand", [".", "?"])
    def test_invert_not_stranded(self, strand):
        feature = FeatureRecord("f", "chr", "src", "site", 0, 10, strand)
        feature.invert()
        assert feature.strand is Strand.from_symbol(strand)
        feature.invert()
        assert feature.strand is Strand.from_symbol(strand)

    def test_negative_strand(self, gene_b):
        assert gene_b.is_negative_strand
        assert gene_b.is_stranded

    def test_range_is_a_copy(self, gene_a):
        r = gene_a.range
        r.invert()
        assert gene_a.strand is Strand.PLUS
        assert gene_a.range == StrandedRange(10, 20, "+")

    def test_overlap_features(self, gene_a, exon_a, gene_b):
        assert gene_a.overlap(exon_a)
        assert exon_a.overlap(gene_a)
        # same coordinates, different sequence
        assert not gene_a.overlap(gene_b)
        assert not gene_b.overlap(gene_a)

    def test_overlap_features_touching(self, gene_a):
        adjacent = FeatureRecord("f", "chrA", "src", "gene", 20, 30, "+")
        assert not gene_a.overlap(adjacent)

    def test_overlap_range_ignores_sequence(self, gene_b):
        assert gene_b.overlap(StrandedRange(15, 25))
        assert gene_b.overlap(Range(19, 40))
        assert not gene_b.overlap(StrandedRange(20, 30))

    def test_includes(self, gene_a):
        assert gene_a.includes(StrandedRange(12, 15))
        assert gene_a.includes(Range(10, 20))
        assert not gene_a.includes(StrandedRange(5, 15))

    def test_is_included_in(self, gene_a):
        assert gene_a.is_included_in(StrandedRange(5, 25))
        assert gene_a.is_included_in(Range(10, 20))
        assert not gene_a.is_included_in(StrandedRange(15, 25))
        assert not gene_a.is_included_in(StrandedRange(12, 15))

    def test_overlap_invalid(self, gene_a):
        with pytest.raises(TypeError):
            gene_a.overlap((10, 20))
        with pytest.raises(TypeError):
            gene_a.includes(None)

    def test_attributes(self, exon_a):
        exon_a.set_attribute("k", "v")
        assert exon_a.get_attribute("k") == "v"
        assert exon_a.has_attribute("k")
        exon_a.remove_attribute("k")
        assert exon_a.get_attribute("k") is NO_ATTRIBUTE_SET
        assert not exon_a.has_attribute("k")
        exon_a.remove_attribute("k")

    def test_get_attribute_does_not_insert(self, exon_a):
        assert exon_a.get_attribute("missing") is NO_ATTRIBUTE_SET
        assert exon_a.get_attribute_list() == set()

    def test_get_or_insert_attribute(self, exon_a):
        assert exon_a.get_or_insert_attribute("Note") == ""
        assert exon_a.get_attribute_list() == {"Note"}
        exon_a.set_attribute("Note", "text")
        assert exon_a.get_or_insert_attribute("Note", "other") == "text"

    def test_attribute_list(self, gene_a):
        gene_a.set_attribute("Alias", "x")
        gene_a.set_attribute("alias", "y")
        assert gene_a.get_attribute_list() == {"Name", "Alias", "alias"}
        assert gene_a.attributes == {"Name": "abcD", "Alias": "x", "alias": "y"}

    def test_attributes_property_is_a_copy(self, gene_a):
        gene_a.attributes["Name"] = "changed"
        assert gene_a.get_attribute("Name") == "abcD"

    def test_clone(self, gene_a):
        clone = gene_a.clone()
        assert clone == gene_a
        assert clone is not gene_a
        assert type(clone) is FeatureRecord
        clone.set_attribute("Name", "other")
        clone.invert()
        clone.feature_id = "gene9"
        assert gene_a.get_attribute("Name") == "abcD"
        assert gene_a.strand is Strand.PLUS
        assert gene_a.feature_id == "gene1"

    def test_clone_subclass(self):
        class Promoter(FeatureRecord):
            pass

        promoter = Promoter("p1", "chrA", "src", "promoter", 0, 10, "+")
        clone = promoter.clone()
        assert type(clone) is Promoter
        assert clone == promoter

    def test_equality(self, gene_a):
        other = FeatureRecord("gene1", "chrA", "annotator", "gene", 10, 20, "+", score=3.5)
        assert other != gene_a
        other.set_attribute("Name", "abcD")
        assert other == gene_a
        other.invert()
        assert other != gene_a
        assert gene_a != "gene1"

    def test_not_hashable(self, gene_a):
        with pytest.raises(TypeError):
            hash(gene_a)

    def test_str(self, gene_a):
        assert str(gene_a) == "FeatureRecord((chrA:10-20:+), type=gene, id=gene1)"

    def test_dict_round_trip(self, gene_a):
        d = gene_a.to_dict()
        assert d == dict(
            feature_id="gene1",
            sequence_id="chrA",
            source="annotator",
            feature_type="gene",
            start=10,
            end=20,
            strand="PLUS",
            score=3.5,
            attributes={"Name": "abcD"},
        )
        assert FeatureRecord.from_dict(d) == gene_a

    def test_dict_no_attributes(self, exon_a):
        assert exon_a.to_dict()["attributes"] is None
        assert FeatureRecord.from_dict(exon_a.to_dict()) == exon_a


class TestFeatureRecordBiopython:
    def test_to_biopython(self, gene_a):
        seq_feature = gene_a.to_biopython()
        assert isinstance(seq_feature, SeqFeature)
        assert seq_feature.type == "gene"
        assert seq_feature.id == "gene1"
        assert (int(seq_feature.location.start), int(seq_feature.location.end)) == (10, 20)
        assert seq_feature.location.strand == 1
        assert seq_feature.qualifiers == {"source": ["annotator"], "score": ["3.5"], "Name": ["abcD"]}

    def test_to_biopython_unset_score(self, exon_a):
        assert exon_a.to_biopython().qualifiers == {"source": ["annotator"]}

    def test_round_trip(self, gene_a, exon_a, gene_b):
        for feature in [gene_a, exon_a, gene_b]:
            assert FeatureRecord.from_biopython(feature.to_biopython(), feature.sequence_id) == feature

    def test_from_biopython(self):
        seq_feature = SeqFeature(
            SimpleLocation(5, 50, strand=-1),
            type="CDS",
            id="cds1",
            qualifiers={"gene": ["thrA"], "product": ["kinase"]},
        )
        feature = FeatureRecord.from_biopython(seq_feature, "chr1", source="genbank")
        assert feature == FeatureRecord(
            "cds1", "chr1", "genbank", "CDS", 5, 50, "-", attributes={"gene": "thrA", "product": "kinase"}
        )

    def test_from_biopython_multi_value(self):
        seq_feature = SeqFeature(
            SimpleLocation(5, 50), type="gene", id="g", qualifiers={"db_xref": ["a:1", "b:2"], "empty": []}
        )
        with pytest.warns(MultiValueQualifierWarning):
            feature = FeatureRecord.from_biopython(seq_feature, "chr1")
        assert feature.get_attribute("db_xref") == "a:1"
        assert not feature.has_attribute("empty")
        assert feature.strand is Strand.UNSTRANDED
        assert feature.source == ""

    def test_from_biopython_compound(self):
        seq_feature = SeqFeature(
            CompoundLocation([SimpleLocation(0, 5, strand=1), SimpleLocation(10, 15, strand=1)]), type="mRNA"
        )
        with pytest.raises(UnsupportedOperationException):
            FeatureRecord.from_biopython(seq_feature, "chr1")

    def test_from_biopython_text_score(self):
        seq_feature = SeqFeature(SimpleLocation(0, 5), type="region", id="r1", qualifiers={"score": ["high"]})
        feature = FeatureRecord.from_biopython(seq_feature, "chr1")
        assert not feature.has_score
        assert feature.get_attribute("score") == "high"

    def test_from_biopython_numeric_score(self):
        seq_feature = SeqFeature(SimpleLocation(0, 5), type="region", id="r1", qualifiers={"score": ["1e-5"]})
        feature = FeatureRecord.from_biopython(seq_feature, "chr1")
        assert feature.score == 1e-5
        assert not feature.has_attribute("score")

    def test_to_biopython_reserved_attributes(self):
        feature = FeatureRecord(
            "f1", "chr1", "annotator", "gene", 0, 10, "+", attributes={"source": "x", "score": "high", "Name": "n"}
        )
        with pytest.warns(ReservedQualifierWarning):
            seq_feature = feature.to_biopython()
        assert seq_feature.qualifiers == {"source": ["annotator"], "Name": ["n"]}

        converted = FeatureRecord.from_biopython(seq_feature, "chr1")
        assert converted.source == "annotator"
        assert not converted.has_score
        assert converted.attributes == {"Name": "n"}

import pytest

from seqfeatures.feature import FeatureRecord, FeatureSet


@pytest.fixture
def gene_a() -> FeatureRecord:
    gene = FeatureRecord("gene1", "chrA", "annotator", "gene", 10, 20, "+", score=3.5)
    gene.set_attribute("Name", "abcD")
    return gene


@pytest.fixture
def exon_a() -> FeatureRecord:
    return FeatureRecord("exon1", "chrA", "annotator", "exon", 12, 15, "+")


@pytest.fixture
def gene_b() -> FeatureRecord:
    return FeatureRecord("gene2", "chrB", "predictor", "gene", 10, 20, "-")


@pytest.fixture
def feature_set(gene_a, exon_a, gene_b) -> FeatureSet:
    return FeatureSet([gene_a, exon_a, gene_b])

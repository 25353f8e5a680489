"""Shared fixtures for alnsite tests."""

import pytest
from alnsite.core.genome import Chromosome, Feature, Genome, GenomeRegistry


GENE_FWD = Feature(genome_index=0, left=100, right=200, strand=1, name="geneA", feature_type="CDS")
GENE_REV = Feature(genome_index=0, left=1100, right=1200, strand=-1, name="geneB", feature_type="CDS")

CHROMOSOME_TSV = (
    "genome_index\tgenome\tchromosome\tstart\tlength\n"
    "0\talpha\tchrA\t1\t1000\n"
    "0\talpha\tchrB\t1001\t500\n"
    "1\tbeta\tcontig_1\t1\t300\n"
    "1\tbeta\tcontig_2\t301\t700\n"
    "2\tgamma\tchr\t1\t2000\n"
)

FEATURE_TSV = (
    "genome_index\tleft\tright\tstrand\tname\ttype\n"
    "0\t100\t200\t+\tgeneA\tCDS\n"
    "0\t1100\t1200\t-\tgeneB\tCDS\n"
)


@pytest.fixture
def registry():
    """Three genomes: alpha (chrA, chrB), beta (contig_1, contig_2), gamma (chr)."""
    return GenomeRegistry([
        Genome(
            index=0,
            name="alpha",
            chromosomes=[Chromosome("chrA", 1, 1000), Chromosome("chrB", 1001, 500)],
            features=[GENE_FWD, GENE_REV],
        ),
        Genome(
            index=1,
            name="beta",
            chromosomes=[Chromosome("contig_1", 1, 300), Chromosome("contig_2", 301, 700)],
        ),
        Genome(
            index=2,
            name="gamma",
            chromosomes=[Chromosome("chr", 1, 2000)],
        ),
    ])


@pytest.fixture
def chromosome_table(tmp_path):
    """Chromosome table TSV matching the registry fixture."""
    path = tmp_path / "chromosomes.tsv"
    path.write_text(CHROMOSOME_TSV)
    return path


@pytest.fixture
def feature_table(tmp_path):
    """Feature table TSV matching the registry fixture."""
    path = tmp_path / "features.tsv"
    path.write_text(FEATURE_TSV)
    return path

"""Tests for the export pipeline and CLI."""

import pytest
from click.testing import CliRunner

from alnsite.cli import cli
from alnsite.config import ExportConfig, SiteConfig
from alnsite.core.extract import AlignedBlock
from alnsite.core.genome import GenomeRegistry
from alnsite.pipeline import SiteExportPipeline


BLOCK = AlignedBlock(rows=["ACGTA", "ACCTA", "A-GTN"], starts=[1, -300, 10])


def make_config(tmp_path, chromosome_table, **site_options):
    return ExportConfig(
        chromosome_table=chromosome_table,
        block=BLOCK,
        output=tmp_path / "sites.tsv",
        site=SiteConfig(**site_options),
    )


class TestSiteExportPipeline:
    """Test SiteExportPipeline."""

    def test_run_summary(self, tmp_path, chromosome_table):
        """Test counts reported by a default run."""
        summary = SiteExportPipeline(make_config(tmp_path, chromosome_table)).run()

        assert summary.columns == 5
        assert summary.sites == 2
        assert summary.gapped == 0
        assert summary.ambiguous == 1
        assert summary.written == 2
        assert summary.output_path == tmp_path / "sites.tsv"

    def test_output_rows(self, tmp_path, chromosome_table):
        """Test sites are written in reference order with a header."""
        SiteExportPipeline(make_config(tmp_path, chromosome_table)).run()
        lines = (tmp_path / "sites.tsv").read_text().splitlines()

        assert lines[0].startswith("SNP pattern\talpha_Contig")
        assert [line.split("\t")[0] for line in lines[1:]] == ["GCG", "AAN"]
        assert lines[1] == "GCG\tchrA\t3\t3\tcontig_1\t298\t-298\tchr\t11\t11"

    def test_reverse_reference_order(self, tmp_path, chromosome_table):
        """Test ordering by a reverse-strand reference genome."""
        pipeline = SiteExportPipeline(make_config(tmp_path, chromosome_table, reference_genome=1))
        assert [s.pattern for s in pipeline.collect_sites()] == ["AAN", "GCG"]

    def test_drop_ambiguous(self, tmp_path, chromosome_table):
        """Test ambiguous sites can be excluded."""
        pipeline = SiteExportPipeline(make_config(tmp_path, chromosome_table, include_ambiguous=False))
        summary = pipeline.run()
        assert summary.sites == 2
        assert summary.written == 1

    def test_include_gapped(self, tmp_path, chromosome_table):
        """Test gapped sites are counted when included."""
        pipeline = SiteExportPipeline(make_config(tmp_path, chromosome_table, include_gapped=True))
        summary = pipeline.run()
        assert summary.sites == 3
        assert summary.gapped == 1
        assert summary.ambiguous == 2

    def test_explicit_registry(self, tmp_path, chromosome_table, registry):
        """Test a prebuilt registry is used as given."""
        pipeline = SiteExportPipeline(make_config(tmp_path, chromosome_table), registry=registry)
        assert pipeline.registry is registry

    def test_genome_count_mismatch(self, tmp_path, chromosome_table):
        """Test block rows must match the registry genomes."""
        config = make_config(tmp_path, chromosome_table)
        config.block = AlignedBlock(rows=["AC", "AT"], starts=[1, 1])
        with pytest.raises(ValueError, match="2 rows"):
            SiteExportPipeline(config)

    def test_reference_out_of_range(self, tmp_path, chromosome_table):
        """Test the reference genome must exist."""
        with pytest.raises(ValueError, match="out of range"):
            SiteExportPipeline(make_config(tmp_path, chromosome_table, reference_genome=3))

    def test_negative_reference(self, tmp_path, chromosome_table):
        """Test a negative reference set after construction is rejected."""
        config = make_config(tmp_path, chromosome_table)
        config.site.reference_genome = -1
        with pytest.raises(ValueError, match="out of range"):
            SiteExportPipeline(config)

    def test_empty_registry_used_as_given(self, tmp_path):
        """Test an empty prebuilt registry is not replaced by reloading the tables."""
        config = make_config(tmp_path, tmp_path / "missing.tsv")
        config.block = AlignedBlock(rows=[], starts=[])
        # Reloading would raise FileNotFoundError for the missing table
        with pytest.raises(ValueError, match="out of range for 0 genomes"):
            SiteExportPipeline(config, registry=GenomeRegistry([]))


class TestCli:
    """Test the command-line interface."""

    def test_export(self, tmp_path, chromosome_table, feature_table):
        """Test export writes the site table."""
        config_path = tmp_path / "run.yaml"
        config_path.write_text(
            "chromosome_table: chromosomes.tsv\n"
            "feature_table: features.tsv\n"
            "output: out/sites.tsv\n"
            "block:\n"
            "  rows: [ACGTA, ACCTA, A-GTN]\n"
            "  starts: [1, -300, 10]\n"
        )
        result = CliRunner().invoke(cli, ['export', str(config_path), '--no-header'])

        assert result.exit_code == 0, result.output
        assert "Wrote 2 sites" in result.output
        lines = (tmp_path / "out" / "sites.tsv").read_text().splitlines()
        assert len(lines) == 2

    def test_export_bad_config(self, tmp_path):
        """Test configuration errors exit with status 1."""
        config_path = tmp_path / "run.yaml"
        config_path.write_text("output: sites.tsv\n")
        result = CliRunner().invoke(cli, ['export', str(config_path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_export_negative_reference(self, tmp_path, chromosome_table):
        """Test a negative --reference exits with status 1."""
        config_path = tmp_path / "run.yaml"
        config_path.write_text(
            "chromosome_table: chromosomes.tsv\n"
            "block:\n"
            "  rows: [ACGTA, ACCTA, A-GTN]\n"
            "  starts: [1, -300, 10]\n"
        )
        result = CliRunner().invoke(cli, ['export', str(config_path), '--reference=-1'])

        assert result.exit_code == 1
        assert "out of range" in result.output
        assert not (tmp_path / "sites.tsv").exists()

    def test_locate_reverse(self, chromosome_table):
        """Test locating a reverse-strand position."""
        result = CliRunner().invoke(cli, ['locate', str(chromosome_table), '1', '--', '-350'])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "contig_2\t50\t-"

    def test_locate_forward(self, chromosome_table):
        """Test locating a forward-strand position."""
        result = CliRunner().invoke(cli, ['locate', str(chromosome_table), '0', '1100'])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "chrB\t100\t+"

    def test_locate_outside(self, chromosome_table):
        """Test positions outside every chromosome fail."""
        result = CliRunner().invoke(cli, ['locate', str(chromosome_table), '0', '9999'])
        assert result.exit_code == 1

    def test_version(self):
        """Test --version."""
        result = CliRunner().invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

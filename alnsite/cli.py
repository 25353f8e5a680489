"""
Command-line interface for alnsite.

Author: Kevin R. Roy
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """alnsite: variant sites of multi-genome alignments."""
    pass


@cli.command()
@click.argument('config', type=click.Path(exists=True))
@click.option('--output', '-o', type=click.Path(),
              help='Output TSV (overrides the config)')
@click.option('--reference', '-r', type=int,
              help='Genome index to order sites by (overrides the config)')
@click.option('--no-header', is_flag=True, default=False,
              help='Do not write the header line')
@click.option('--verbose', '-v', is_flag=True, default=False,
              help='Debug logging')
def export(config, output, reference, no_header, verbose):
    """
    Export the variant sites of an aligned block.

    CONFIG is a YAML file naming the chromosome table, optional feature
    table and the aligned block.

    \b
    Example:
      alnsite export run.yaml -o sites.tsv --reference 1
    """
    from .config import ExportConfig
    from .pipeline import SiteExportPipeline

    _setup_logging(verbose)

    try:
        export_config = ExportConfig.from_yaml(Path(config))
        if reference is not None:
            export_config.site.reference_genome = reference
        if no_header:
            export_config.header = False
        summary = SiteExportPipeline(export_config).run(
            Path(output) if output else None
        )
    except (ValueError, LookupError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {summary.written} sites to {summary.output_path}")


@cli.command(context_settings={'ignore_unknown_options': True})
@click.argument('chromosome_table', type=click.Path(exists=True))
@click.argument('genome_index', type=int)
@click.argument('position', type=int)
def locate(chromosome_table, genome_index, position):
    """
    Resolve a signed genome-wide POSITION to its contig and local offset.

    Negative positions are on the reverse strand; pass them after "--".
    """
    from .core.coordinates import SignedPosition
    from .io.genomes import load_registry

    if position == 0:
        click.echo("Error: position 0 marks a gap and has no contig", err=True)
        sys.exit(1)

    try:
        registry = load_registry(Path(chromosome_table))
        signed = SignedPosition.from_int(position)
        chrom = registry.resolve_chromosome(genome_index, signed.coordinate)
        start = registry.chromosome_start(genome_index, chrom)
    except (ValueError, LookupError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    offset = signed.coordinate - start + 1
    click.echo(f"{chrom.name}\t{offset}\t{signed.strand.symbol}")


if __name__ == "__main__":
    cli()

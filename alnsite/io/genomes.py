"""
Chromosome and feature table loading.

Author: Kevin R. Roy
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional
import logging

import pandas as pd

from ..core.genome import Chromosome, Feature, Genome, GenomeRegistry

logger = logging.getLogger(__name__)

CHROMOSOME_COLUMNS = ('genome_index', 'chromosome', 'start', 'length')
FEATURE_COLUMNS = ('genome_index', 'left', 'right', 'strand')

STRAND_VALUES = {'+': 1, '-': -1, '1': 1, '-1': -1, '+1': 1}


def _require_columns(df: pd.DataFrame, columns, path: Path):
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing required columns: {', '.join(missing)}")


def parse_strand(value) -> int:
    """Parse a strand symbol ('+', '-', 1, -1) into +1 or -1."""
    key = str(value).strip()
    if key not in STRAND_VALUES:
        raise ValueError(f"Invalid strand: {value!r}")
    return STRAND_VALUES[key]


def load_chromosome_table(path: Path) -> Dict[int, Dict]:
    """
    Load a chromosome table TSV.

    Required columns:
    - genome_index: Zero-based genome index
    - chromosome: Chromosome/contig name
    - start: Genome-wide start (1-based)
    - length: Length in bp

    Optional columns:
    - genome: Genome name (defaults to genome_<index>)

    Returns:
        Dict of genome_index -> {'name': str, 'chromosomes': List[Chromosome]}
    """
    df = pd.read_csv(
        path, sep='\t', dtype={'genome': str, 'chromosome': str},
        keep_default_na=False, na_values=[''],
    )
    _require_columns(df, CHROMOSOME_COLUMNS, path)

    genomes: Dict[int, Dict] = {}
    for _, row in df.iterrows():
        idx = int(row['genome_index'])
        name = str(row['genome']) if 'genome' in row and pd.notna(row.get('genome')) else f"genome_{idx}"
        entry = genomes.setdefault(idx, {'name': name, 'chromosomes': []})
        entry['chromosomes'].append(Chromosome(
            name=str(row['chromosome']),
            start=int(row['start']),
            length=int(row['length']),
        ))

    logger.info(f"Loaded {len(df)} chromosomes for {len(genomes)} genomes from {path}")
    return genomes


def load_feature_table(path: Path) -> List[Feature]:
    """
    Load a feature table TSV.

    Required columns: genome_index, left, right, strand ('+'/'-' or 1/-1).
    Optional columns: name, type.
    """
    df = pd.read_csv(
        path, sep='\t', dtype={'strand': str, 'name': str, 'type': str},
        keep_default_na=False, na_values=[''],
    )
    _require_columns(df, FEATURE_COLUMNS, path)

    features = []
    for _, row in df.iterrows():
        features.append(Feature(
            genome_index=int(row['genome_index']),
            left=int(row['left']),
            right=int(row['right']),
            strand=parse_strand(row['strand']),
            name=str(row['name']) if 'name' in row and pd.notna(row.get('name')) else None,
            feature_type=str(row['type']) if 'type' in row and pd.notna(row.get('type')) else None,
        ))

    logger.info(f"Loaded {len(features)} features from {path}")
    return features


def load_registry(
    chromosome_table: Path,
    feature_table: Optional[Path] = None
) -> GenomeRegistry:
    """
    Build a GenomeRegistry from chromosome and (optional) feature tables.

    Args:
        chromosome_table: Path to chromosome table TSV
        feature_table: Optional path to feature table TSV

    Returns:
        GenomeRegistry covering every genome in the chromosome table
    """
    genome_entries = load_chromosome_table(chromosome_table)

    features_by_genome = defaultdict(list)
    if feature_table is not None:
        for feature in load_feature_table(feature_table):
            if feature.genome_index not in genome_entries:
                logger.warning(
                    f"Skipping feature {feature.name} for unknown genome {feature.genome_index}"
                )
                continue
            features_by_genome[feature.genome_index].append(feature)

    genomes = [
        Genome(
            index=idx,
            name=entry['name'],
            chromosomes=entry['chromosomes'],
            features=features_by_genome[idx],
        )
        for idx, entry in sorted(genome_entries.items())
    ]
    return GenomeRegistry(genomes)

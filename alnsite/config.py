"""
Configuration classes for alnsite.

Author: Kevin R. Roy
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .core.extract import AlignedBlock
from .utils.sequence import GAP_CHAR

TRUE_VALUES = {'true', 'yes', 'on', '1'}
FALSE_VALUES = {'false', 'no', 'off', '0'}


def parse_bool(value, key: str) -> bool:
    """Parse a boolean option given as a bool or a string such as 'false'."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"'{key}' must be true or false, got {value!r}")


@dataclass
class SiteConfig:
    """Site extraction and ordering options."""
    gap_char: str = GAP_CHAR
    include_gapped: bool = False  # Emit columns mixing gaps with a single base
    include_ambiguous: bool = True  # Keep sites with ambiguity codes or gaps
    reference_genome: int = 0  # Genome index the output is ordered by

    def __post_init__(self):
        if len(self.gap_char) != 1:
            raise ValueError(f"Gap symbol must be a single character, got {self.gap_char!r}")
        if self.reference_genome < 0:
            raise ValueError(f"Reference genome index must be >= 0, got {self.reference_genome}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SiteConfig':
        """Create from dictionary."""
        return cls(
            gap_char=str(d.get('gap_char', GAP_CHAR)),
            include_gapped=parse_bool(d.get('include_gapped', False), 'include_gapped'),
            include_ambiguous=parse_bool(d.get('include_ambiguous', True), 'include_ambiguous'),
            reference_genome=int(d.get('reference_genome', 0)),
        )


def block_from_dict(d: Dict[str, Any]) -> AlignedBlock:
    """Create an AlignedBlock from a {'rows': [...], 'starts': [...]} mapping."""
    for key in ('rows', 'starts'):
        if key not in d:
            raise ValueError(f"Alignment block must have '{key}'")
    return AlignedBlock(
        rows=[str(row) for row in d['rows']],
        starts=[int(s) for s in d['starts']],
    )


@dataclass
class ExportConfig:
    """Full site export configuration."""
    chromosome_table: Path
    block: AlignedBlock
    output: Path
    feature_table: Optional[Path] = None
    header: bool = True
    site: SiteConfig = field(default_factory=SiteConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> 'ExportConfig':
        """
        Load configuration from YAML file.

        Relative paths are resolved against the YAML file's directory. The
        alignment block is given inline under 'block' or in a separate
        YAML file named by 'block_file'.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        base_dir = path.parent

        def resolve(value: str) -> Path:
            p = Path(value)
            return p if p.is_absolute() else base_dir / p

        if 'chromosome_table' not in data:
            raise ValueError(f"{path}: 'chromosome_table' is required")

        if 'block_file' in data:
            with open(resolve(data['block_file'])) as f:
                block_data = yaml.safe_load(f) or {}
        elif 'block' in data:
            block_data = data['block']
        else:
            raise ValueError(f"{path}: either 'block' or 'block_file' is required")

        return cls(
            chromosome_table=resolve(data['chromosome_table']),
            block=block_from_dict(block_data),
            output=resolve(data.get('output', 'sites.tsv')),
            feature_table=resolve(data['feature_table']) if data.get('feature_table') else None,
            header=parse_bool(data.get('header', True), 'header'),
            site=SiteConfig.from_dict(data.get('site', {}) or {}),
        )

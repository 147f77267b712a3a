"""
Configuration for fuzzion scans.

Settings can come from a YAML file (``fuzzion init`` writes a template) and
be overridden on the command line.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_MAX_SUBSTITUTIONS = 2  # default maximum substitutions allowed
DEFAULT_BATCH_SIZE = 10000

CONFIG_TEMPLATE = '''# fuzzion configuration template
# Edit this file and pass it with: fuzzion scan --config fuzzion.yaml ...

# Maximum substitutions allowed when matching each target sequence
max_substitutions: 2

# Worker processes used to scan reads (1 = scan in the main process)
threads: 1

# Reads handed to a worker at a time
batch_size: 10000

# Optional: write per-label hit counts to this TSV file
# summary_path: fuzzion_summary.tsv
'''


def _is_int(value: Any) -> bool:
    # YAML true/false load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class ScanConfig:
    """Settings applied to every read and every target pair in a scan."""
    max_substitutions: int = DEFAULT_MAX_SUBSTITUTIONS
    threads: int = 1
    batch_size: int = DEFAULT_BATCH_SIZE
    summary_path: Optional[Path] = None

    def validate(self) -> 'ScanConfig':
        """Check values, raising ValueError on the first invalid one."""
        if not _is_int(self.max_substitutions) or self.max_substitutions < 0:
            raise ValueError(
                f"max_substitutions must be a non-negative integer, got {self.max_substitutions!r}"
            )
        if not _is_int(self.threads) or self.threads < 1:
            raise ValueError(f"threads must be a positive integer, got {self.threads!r}")
        if not _is_int(self.batch_size) or self.batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {self.batch_size!r}")
        return self

    def with_overrides(self, **overrides: Any) -> 'ScanConfig':
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScanConfig':
        """Create from dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = dict(data)
        if values.get('summary_path') is not None:
            values['summary_path'] = Path(values['summary_path'])

        return cls(**values).validate()

    @classmethod
    def from_yaml(cls, path: Path) -> 'ScanConfig':
        """Load configuration from YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Cannot parse configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")

        return cls.from_dict(data)


def write_config_template(output_path: Path) -> Path:
    """Write a commented YAML configuration template."""
    with open(output_path, 'w') as f:
        f.write(CONFIG_TEMPLATE)
    return output_path

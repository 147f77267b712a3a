"""
Command-line interface for fuzzion.

fuzzion: find reads containing two target sequences (or one target and not
another), matching each approximately with a limited number of
substitutions.
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import ScanConfig, write_config_template
from .core.target import TargetSpecError
from .engine import MatchEngine
from .io.output import write_hits, write_summary_tsv
from .io.reads import iter_reads
from .io.targets import STDIN_PATH, load_target_pairs


def _setup_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


@click.group()
@click.version_option(version=__version__, prog_name='fuzzion')
def cli():
    """fuzzion: fuzzy matching of target sequence pairs in reads."""
    pass


@cli.command()
@click.argument('reads', type=click.Path(exists=True, dir_okay=False))
@click.option('--targets', '-t', type=click.Path(allow_dash=True), default=STDIN_PATH,
              help='Target pairs file (label, left, right; tab-delimited). Default: stdin')
@click.option('--output', '-o', type=click.Path(dir_okay=False, allow_dash=True), default='-',
              help='Output file for matching reads. Default: stdout')
@click.option('--maxsub', 'max_substitutions', type=int, default=None,
              help='Maximum substitutions allowed per target (default: 2)')
@click.option('--threads', type=int, default=None,
              help='Worker processes (default: 1)')
@click.option('--batch-size', type=int, default=None,
              help='Reads per worker batch (default: 10000)')
@click.option('--summary', 'summary_path', type=click.Path(dir_okay=False), default=None,
              help='Write per-label hit counts to this TSV file')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file (command-line options take precedence)')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Only log warnings and errors')
def scan(reads, targets, output, max_substitutions, threads, batch_size,
         summary_path, config_path, verbose, quiet):
    """
    Scan READS for target pairs and write each hit.

    READS may be a BAM, SAM, CRAM, FASTQ or FASTA file. Every record is
    scanned, whatever its alignment flags.

    Each hit is written as: read name, read sequence with the matches in
    [brackets] and substitutions in lowercase, and the target pair label.

    \b
    Example:
      fuzzion scan sample.bam --maxsub 1 < targets.tsv > hits.tsv
    """
    _setup_logging(verbose, quiet)

    # Configuration
    try:
        config = ScanConfig.from_yaml(Path(config_path)) if config_path else ScanConfig()
        config = config.with_overrides(
            max_substitutions=max_substitutions,
            threads=threads,
            batch_size=batch_size,
            summary_path=Path(summary_path) if summary_path else None,
        ).validate()
    except (OSError, ValueError) as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    # Target pairs are fully validated before any read is scanned
    try:
        target_pairs = load_target_pairs(targets)
    except TargetSpecError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: unable to read targets: {e}", err=True)
        sys.exit(1)

    engine = MatchEngine(target_pairs, max_substitutions=config.max_substitutions)
    hits = engine.scan_parallel(
        iter_reads(reads),
        threads=config.threads,
        batch_size=config.batch_size,
    )

    try:
        with click.open_file(output, 'w') as handle:
            write_hits(hits, handle)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if config.summary_path:
        write_summary_tsv(engine.stats, config.summary_path)


@cli.command()
@click.option('--targets', '-t', type=click.Path(allow_dash=True), default=STDIN_PATH,
              help='Target pairs file. Default: stdin')
def check(targets):
    """
    Validate a target pairs file.

    Prints every target pair, each followed by its reverse complement, as
    it will be searched.
    """
    try:
        target_pairs = load_target_pairs(targets)
    except TargetSpecError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: unable to read targets: {e}", err=True)
        sys.exit(1)

    for pair in target_pairs:
        click.echo(str(pair))

    click.echo(f"{len(target_pairs) // 2} target pairs OK", err=True)


@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False), default='fuzzion.yaml',
              help='Output config file path')
def init(output):
    """Generate a template configuration file."""
    write_config_template(Path(output))

    click.echo(f"Generated configuration template: {output}")
    click.echo("\nEdit this file and run:")
    click.echo(f"  fuzzion scan --config {output} READS < targets.tsv")


if __name__ == '__main__':
    cli()

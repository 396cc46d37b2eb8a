"""
Command-line interface for percolation_grid.

Commands:
    percolation-grid simulate --n 200 --trials 100 --seed 42
    percolation-grid run --config threshold_sweep.yaml
    percolation-grid results summarize --input trials.csv --output summary.csv
"""

import click
from pathlib import Path

from .. import __version__


@click.group()
@click.version_option(version=__version__)
def cli():
    """Percolation Grid - site percolation threshold estimation."""
    pass


# ============================================================================
# Simulation Commands
# ============================================================================

@cli.command('simulate')
@click.option('--n', '-n', 'n', required=True, type=int, help='Grid side length')
@click.option('--trials', '-t', required=True, type=int, help='Number of independent trials')
@click.option('--seed', type=int, default=None, help='Random seed (default: fresh entropy)')
@click.option('--confidence', default=0.95, show_default=True,
              help='Confidence level of the interval around the mean')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Optional CSV file for per-trial results')
def simulate(n, trials, seed, confidence, output_file):
    """Estimate the percolation threshold of an n-by-n grid."""
    from ..percolation.stats import PercolationStats

    try:
        stats = PercolationStats(n, trials, seed=seed, confidence=confidence)
    except ValueError as e:
        raise click.BadParameter(str(e))

    click.echo(f"Running {trials} trials on a {n}x{n} grid")
    stats.run()

    summary = stats.summary()
    click.echo(f"mean                    = {summary['mean']}")
    click.echo(f"stddev                  = {summary['stddev']}")
    click.echo(f"{confidence:.0%} confidence interval = "
               f"[{summary['confidence_lo']}, {summary['confidence_hi']}]")

    if output_file:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        stats.to_dataframe().to_csv(output_file, index=False)
        click.echo(f"✓ Saved trials to {output_file}")


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
def run(config_path):
    """Run a threshold sweep defined in a YAML config."""
    from ..run import RunConfig, run_from_config

    try:
        config = RunConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.UsageError(f"Invalid run config: {e}")

    run_from_config(config)


# ============================================================================
# Results Commands
# ============================================================================

@cli.group()
def results():
    """Result aggregation commands."""
    pass


@results.command('summarize')
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(exists=True),
              help='Trials CSV (from simulate or run)')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Optional output CSV for the summary')
@click.option('--confidence', default=0.95, show_default=True,
              help='Confidence level of the interval around the mean')
def results_summarize(input_file, output_file, confidence):
    """Summarize saved trials per grid size."""
    import pandas as pd
    from ..percolation.stats import summarize_trials

    try:
        df = pd.read_csv(input_file)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise click.UsageError(f"Could not read trials CSV {input_file}: {e}")

    try:
        summary = summarize_trials(df, confidence=confidence)
    except ValueError as e:
        raise click.UsageError(str(e))

    if len(summary) == 0:
        click.echo("No trials found", err=True)
        return

    click.echo(summary.to_string(index=False))

    if output_file:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(output_file, index=False)
        click.echo(f"✓ Saved summary to {output_file}")


if __name__ == '__main__':
    cli()

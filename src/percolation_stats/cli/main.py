"""
Command-line interface for percolation_stats.

Commands:
    percolation-stats stats N TRIALS [--seed S] [--verbose]
    percolation-stats run --config run.yaml

Both print the sample mean, the sample standard deviation and the 95%
confidence interval of the percolation threshold.
"""

import click
import yaml

from .. import __version__


@click.group()
@click.version_option(version=__version__)
def cli():
    """Percolation Stats - Monte Carlo estimation of the site percolation threshold."""
    pass


def _simulate(n, trials, seed, verbose):
    from ..percolation import InvalidArgument, UniformRandomSource, run_trials, validate_trial_args

    try:
        validate_trial_args(n, trials)
    except InvalidArgument as e:
        raise click.UsageError(str(e))

    progress = None
    if verbose:
        def progress(i, total, fraction):
            click.echo(f"  trial {i}/{total}: open fraction = {fraction:.6f}")

    click.echo(f"Running {trials} trials on a {n}x{n} grid"
               + (f" (seed={seed})" if seed is not None else ""), err=True)

    stats = run_trials(n, trials, UniformRandomSource(seed), progress=progress)

    click.echo(f"mean                    = {stats.mean():f}")
    click.echo(f"stddev                  = {stats.stddev():f}")
    click.echo(f"95% confidence interval = [{stats.confidence_lo():f}, {stats.confidence_hi():f}]")


@cli.command('stats')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=click.IntRange(min=0), default=None,
              help='Seed for the random source (default: unseeded)')
@click.option('--verbose', '-v', is_flag=True, help='Print the open fraction of every trial')
def stats_command(n, trials, seed, verbose):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    _simulate(n, trials, seed, verbose)


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
def run_command(config_path):
    """Estimate the percolation threshold using settings from a run config."""
    from ..run import RunConfig

    try:
        config = RunConfig.from_yaml(config_path)
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint="'--config'")

    click.echo(f"Run: {config.run_name}", err=True)
    _simulate(config.n, config.trials, config.seed, config.verbose)


if __name__ == '__main__':
    cli()

"""
Command Line Interface for OpenSwarm.
"""

import json
import sys
from typing import Optional

import click
import numpy as np
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from .core.config import Config, load_config, configure_logging
from .core.types import VelocityUpdateType, BestTracking
from .models.optimization import OptimizationError
from .objectives import OBJECTIVES, get_objective, list_objectives
from .optimization import ParticleSwarmOptimizer
from .optimization.particle_swarm import CONSTRICTION_ACCELERATION


console = Console()


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Log progress messages")
@click.option("--debug", is_flag=True, help="Log debug messages")
def cli(verbose: bool, debug: bool):
    """OpenSwarm particle swarm optimization CLI"""
    if debug:
        configure_logging("DEBUG")
    elif verbose:
        configure_logging("INFO")
    else:
        configure_logging("WARNING")


@cli.command()
@click.option("--function", "-f", "function_name", type=click.Choice(list_objectives()),
              default="sphere", show_default=True, help="Benchmark objective")
@click.option("--dimensions", "-d", type=int, default=2, show_default=True,
              help="Number of search-space coordinates")
@click.option("--start", "-x", type=float, default=3.0, show_default=True,
              help="Initial value of every coordinate")
@click.option("--variant", type=click.Choice([v.value for v in VelocityUpdateType]),
              help="Velocity update policy")
@click.option("--cognitive-acceleration", "c1", type=float,
              help="Pull towards each particle's own best (c1)")
@click.option("--social-acceleration", "c2", type=float,
              help="Pull towards the swarm's best (c2)")
@click.option("--swarm-size", "-n", type=int, help="Number of particles")
@click.option("--max-iterations", "-m", type=int, help="Maximum iterations (0 for no limit)")
@click.option("--tolerance", "-t", type=float, help="Termination tolerance")
@click.option("--seed", "-s", type=int, help="Random seed")
@click.option("--tracking", type=click.Choice([b.value for b in BestTracking]),
              help="Keep one personal best per particle or a single shared one")
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def optimize(function_name: str, dimensions: int, start: float, variant: Optional[str],
             c1: Optional[float], c2: Optional[float],
             swarm_size: Optional[int], max_iterations: Optional[int],
             tolerance: Optional[float], seed: Optional[int], tracking: Optional[str],
             config: Optional[str], as_json: bool):
    """Minimize a benchmark objective with particle swarm optimization.

    Selecting ``--variant constriction_factor`` without either acceleration
    option switches to c1 = c2 = 2.05 when the configured pair sums to 4 or
    less.
    """
    swarm_config = Config.from_file(config) if config else load_config()
    pso_config = swarm_config.pso

    if (variant == VelocityUpdateType.CONSTRICTION_FACTOR.value and c1 is None and c2 is None
            and pso_config.cognitive_acceleration + pso_config.social_acceleration <= 4.0):
        pso_config.cognitive_acceleration = CONSTRICTION_ACCELERATION
        pso_config.social_acceleration = CONSTRICTION_ACCELERATION

    overrides = {
        "velocity_update": variant,
        "cognitive_acceleration": c1,
        "social_acceleration": c2,
        "swarm_size": swarm_size,
        "max_iterations": max_iterations,
        "tolerance": tolerance,
        "seed": seed,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(pso_config, name, value)

    if tracking is not None:
        pso_config.best_tracking = tracking

    if dimensions < 1:
        console.print("[red]Error: --dimensions must be at least 1")
        sys.exit(1)

    objective = get_objective(function_name)
    iterate = np.full((dimensions, 1), start)

    try:
        optimizer = ParticleSwarmOptimizer(pso_config)
        result = optimizer.minimize(objective, iterate)
    except OptimizationError as e:
        console.print(f"[red]Optimization failed ({e.error_type}): {e.message}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    result_table = Table(title=f"PSO on {function_name}")
    result_table.add_column("Metric", style="cyan")
    result_table.add_column("Value", style="white")

    result_table.add_row("Status", result.status.value)
    result_table.add_row("Objective", f"{result.fun:.6g}")
    result_table.add_row("Best Point", np.array2string(result.x.ravel(), precision=6))
    result_table.add_row("Iterations", str(result.nit))
    result_table.add_row("Evaluations", str(result.nfev))
    result_table.add_row("Velocity Update", pso_config.velocity_update)
    result_table.add_row("Solve Time", f"{result.solve_time:.3f}s")

    console.print(result_table)


@cli.command()
def functions():
    """List the available benchmark objectives."""
    functions_table = Table(title="Benchmark Objectives")
    functions_table.add_column("Name", style="cyan")
    functions_table.add_column("Description", style="white")

    for name in list_objectives():
        functions_table.add_row(name, OBJECTIVES[name].description)

    console.print(functions_table)


@cli.command()
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
def config_show(config: Optional[str]):
    """Show current configuration."""
    swarm_config = Config.from_file(config) if config else load_config()

    console.print(Panel(
        json.dumps(swarm_config.to_dict(), indent=2),
        title="[bold blue]OpenSwarm Configuration[/bold blue]",
        expand=False
    ))


@cli.command()
@click.option("--output", "-o", type=click.Path(), required=True, help="Output file path")
def config_init(output: str):
    """Write the default configuration to a YAML file."""
    try:
        Config().to_file(output)
    except OSError as e:
        console.print(f"[red]Failed to write configuration: {e}")
        sys.exit(1)

    console.print(f"[green]Default configuration written to: {output}")


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Monte Carlo Pareto-Front Portfolio Selection

Main entry point. Simulates random portfolios for the configured asset
universe, reduces them to the Pareto front and prints the front.

Usage:
    python -m mc_pareto
"""

import logging
import sys
from typing import List, Optional, Tuple

from mc_pareto.config.simulation_config import SimulationConfig, load_simulation_config
from mc_pareto.engine.portfolio import Portfolio
from mc_pareto.exceptions import PortfolioSimulationError
from mc_pareto.montecarlo.random_source import RandomSource
from mc_pareto.montecarlo.simulation import PortfolioSimulation
from mc_pareto.pareto.front import ParetoFront, ParetoFrontBuilder
from mc_pareto.reporting.console import print_pareto_front
from mc_pareto.reporting.tables import summarize_front


def run_pareto_simulation(config: SimulationConfig,
                          random_source: Optional[RandomSource] = None) -> Tuple[List[Portfolio], ParetoFront]:
    """
    Run the full simulate -> evaluate -> filter -> reduce pipeline.

    Parameters:
    -----------
    config : SimulationConfig
        Run configuration
    random_source : RandomSource, optional
        Overrides the config-seeded numpy source

    Returns:
    --------
    tuple: (population, front)
    """
    logging.info("=== Starting Monte Carlo Portfolio Simulation ===")
    logging.info(f"Assets: {config.get_asset_names()}")
    logging.info(f"Simulations: {config.num_simulations}, active assets in [{config.min_assets}, {config.max_assets}]")
    logging.info(f"Transaction cost rate: {config.transaction_cost_rate:.4%}")

    simulation = PortfolioSimulation.from_config(config, random_source=random_source)
    population = simulation.simulate_portfolios()

    builder = ParetoFrontBuilder(uniqueness=config.front_uniqueness)
    front = builder.build(population)

    summary = summarize_front(front)
    if summary['size']:
        logging.info(
            f"Front spans return {summary['min_return']:.4f}..{summary['max_return']:.4f}, "
            f"risk {summary['min_volatility']:.4f}..{summary['max_volatility']:.4f}"
        )
    else:
        logging.warning("Pareto front is empty; no portfolio satisfied the asset-count constraint")

    return population, front


def main(config_path: Optional[str] = None) -> int:
    """Main entry point for the application."""
    try:
        config = load_simulation_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        logging.basicConfig(level=logging.ERROR, format='%(levelname)s - %(message)s')
        logging.error(f"Could not load configuration: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    try:
        _, front = run_pareto_simulation(config)
    except PortfolioSimulationError as e:
        logging.error(f"Simulation failed: {e}")
        return 1

    print_pareto_front(front)
    return 0


if __name__ == "__main__":
    sys.exit(main())

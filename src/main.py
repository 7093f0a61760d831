"""Main entry point for the team roles simulation."""
from logging_config import setup_logging
from simulation import Simulation


def main():
    simulation = Simulation()
    setup_logging(verbose=simulation.verbose, quiet=simulation.quiet)
    simulation.run()

if __name__ == "__main__":
    main()

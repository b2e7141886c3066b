# cli/main.py

import argparse
import logging
import sys
from importlib import metadata

from models.motion import get_factory
from simulation import serializer
from simulation.config import SimulationConfig, basic_config, get_config, load_config
from utils.exceptions import MotionSimError
from utils.logger import enable_file_logging, disable_file_logging, logger

try:
    version = metadata.version("motionsim")
except metadata.PackageNotFoundError:
    version = "0+unknown"

PROMPT = "Enter v0 and angle α separated by a space: "


def get_arg_parser():
    parser = argparse.ArgumentParser(
        prog="motionsim",
        description="Projectile trajectory under constant gravity"
    )
    parser.add_argument("-v", "--version", action='version',
                        version=f'motionsim v{version}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")
    parser.add_argument("-c", "--config", action="store", help="TOML file with a [simulation] table")
    parser.add_argument("-t", "--total-time", action="store", type=float, help="Simulated time [s]")
    parser.add_argument("-s", "--step", action="store", type=float, help="Time step [s]")
    parser.add_argument("-f", "--file", action="store", help="File used to save and restore the launch data")
    parser.add_argument("-p", "--plot", action="store_true", help="Plot the trajectory with matplotlib")
    parser.add_argument("-l", "--log-file", action="store", help="Also write log messages to this file")
    return parser


def read_launch_parameters(stream=None, prompt: str = PROMPT):
    """
    Prompt for ``v0`` and the launch angle in degrees.

    The two numbers are whitespace separated and may span several lines.
    Malformed numbers raise ValueError.
    """
    stream = sys.stdin if stream is None else stream
    print(prompt, end="", flush=True)

    tokens = []
    for line in stream:
        tokens.extend(line.split())
        if len(tokens) >= 2:
            break
    if len(tokens) < 2:
        raise ValueError("Expected two numbers: v0 and angle")
    return float(tokens[0]), float(tokens[1])


def build_config(args) -> SimulationConfig:
    if args.config:
        config = load_config(args.config)
        logger.info("Loaded configuration from %s", args.config)
    else:
        config = get_config()
    overrides = {}
    if args.total_time is not None:
        overrides["total_time"] = args.total_time
    if args.step is not None:
        overrides["step"] = args.step
    if args.file is not None:
        overrides["output_file"] = args.file
    return config._replace(**overrides)


def run(config: SimulationConfig, stream=None, plot: bool = False) -> int:
    v0, alpha = read_launch_parameters(stream)

    factory = get_factory()
    data = factory.create_motion_data(v0, alpha)
    data.calculate(config.total_time, config.step, g=config.gravity)

    print("Trajectory (text):")
    data.display_results()

    try:
        serializer.save(data, config.output_file)
        print("Data saved to file.")

        loaded = serializer.load(config.output_file)
        print("Object restored. Recomputing:")
        loaded.calculate(config.total_time, config.step, g=config.gravity)
        loaded.display_results()
    except (OSError, MotionSimError) as exc:
        logger.debug("Persistence failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)

    if plot:
        import matplotlib.pyplot as plt
        from trajectories.preview import plot_trajectory

        plot_trajectory(data.trajectory, label=f"v0={v0:g}, α={alpha:g}°")
        plt.show()

    return 0


def main(argv=None):
    args = get_arg_parser().parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)
    if args.log_file:
        enable_file_logging(args.log_file)

    try:
        config = build_config(args)
        basic_config(config)
        return run(config, plot=args.plot)
    finally:
        disable_file_logging()


if __name__ == '__main__':
    sys.exit(main())

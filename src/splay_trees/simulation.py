# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""
Priority-queue simulation on a splay tree.

The tree holds timestamps. After building a tree of `size` random timestamps,
each iteration dequeues the earliest timestamp (find_min + delete) and
enqueues a fresh random one (insert). The average wall-clock time of one
iteration is reported.

Usage:
    splay-sim [size] [seed] [--iterations N] [--debug] [--verbose]
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from splay_trees.base import Node
from splay_trees.profiling import measure
from splay_trees.render import print_ascii_tree
from splay_trees.splay_tree import delete, find_min, insert

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# Diagnostic tree drawings are off unless requested
DEBUG = False

DEFAULT_SIZE = 1000
DEFAULT_SEED = 831970590
NUM_ITERATIONS = 100
DEBUG_ITERATIONS = 10


@dataclass
class SimulationConfig:
    """
    Knobs of one simulation run.

    Attributes:
        size (int): Number of timestamps in the initial tree.
        seed (int): Seed of the random generator.
        low_threshold (float): Smallest timestamp that can be drawn.
        high_threshold (float): Width of the timestamp range; defaults to `size`.
        iterations (int): Dequeue/enqueue cycles; defaults to NUM_ITERATIONS,
            or DEBUG_ITERATIONS when `debug` is set.
        debug (bool): Draw the tree after every step.
    """
    size: int = DEFAULT_SIZE
    seed: int = DEFAULT_SEED
    low_threshold: float = 1.0
    high_threshold: Optional[float] = None
    iterations: Optional[int] = None
    debug: bool = DEBUG

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        if self.high_threshold is None:
            self.high_threshold = float(self.size)
        if self.high_threshold < 0:
            raise ValueError(f"high_threshold must be >= 0, got {self.high_threshold}")
        if self.iterations is None:
            self.iterations = DEBUG_ITERATIONS if self.debug else NUM_ITERATIONS
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")


@dataclass
class SimulationResult:
    root: Optional[Node]
    time_per_iteration: float
    iterations: int


def make_rng(config: SimulationConfig) -> np.random.Generator:
    return np.random.default_rng(config.seed)


def generate_timestamp(rng: np.random.Generator, config: SimulationConfig) -> float:
    """Draw a timestamp uniformly from [low_threshold, low_threshold + high_threshold)."""
    return config.low_threshold + config.high_threshold * rng.random()


def generate(root: Optional[Node], config: SimulationConfig, rng: np.random.Generator) -> Optional[Node]:
    """Insert `config.size` random timestamps into the tree and return its root."""
    for _ in range(config.size):
        root = insert(root, generate_timestamp(rng, config))
    return root


def _debug_print(config: SimulationConfig, title: str, root: Optional[Node]) -> None:
    if not config.debug:
        return
    print(title)
    print_ascii_tree(root)
    print("\n")


def simulate(
        root: Optional[Node],
        config: SimulationConfig,
        rng: np.random.Generator,
) -> SimulationResult:
    """
    Run `config.iterations` dequeue/enqueue cycles and time them.

    Each cycle removes the smallest timestamp and inserts a new random one,
    so the number of keys stays constant unless a drawn timestamp is already
    present.
    """
    t_start = time.perf_counter()
    for i in range(config.iterations):
        if root is None:
            logger.warning(f"simulate(): tree is empty in iteration {i}, nothing to dequeue")
        else:
            with measure("simulate.dequeue"):
                root = delete(root, find_min(root).key)
        _debug_print(config, "After remove", root)

        with measure("simulate.enqueue"):
            root = insert(root, generate_timestamp(rng, config))
        _debug_print(config, "After insert", root)

    _debug_print(config, "Last print", root)
    elapsed = time.perf_counter() - t_start

    per_iteration = elapsed / config.iterations if config.iterations else 0.0
    return SimulationResult(root=root, time_per_iteration=per_iteration, iterations=config.iterations)


def run_simulation(config: SimulationConfig) -> SimulationResult:
    """Build the initial tree for `config` and run the timed simulation on it."""
    logger.debug(f"Starting simulation with {config}")
    rng = make_rng(config)

    root = generate(None, config, rng)
    logger.debug(f"Generated initial tree with {config.size} timestamps")
    _debug_print(config, "First print", root)

    result = simulate(root, config, rng)
    logger.debug(f"Finished {result.iterations} iterations, {result.time_per_iteration:g}s each")
    return result


def node_footprint(size: int) -> int:
    """Bytes taken by `size` node objects (shallow size, keys excluded)."""
    return sys.getsizeof(Node(0.0)) * size


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Splay tree priority-queue simulation")
    parser.add_argument("size", nargs="?", type=int, default=DEFAULT_SIZE,
                        help="Number of timestamps in the initial tree")
    parser.add_argument("seed", nargs="?", type=int, default=DEFAULT_SEED,
                        help="Seed for the timestamp generator")
    parser.add_argument("--iterations", type=int, default=None,
                        help="Number of dequeue/enqueue cycles "
                             f"(default {NUM_ITERATIONS}, {DEBUG_ITERATIONS} with --debug)")
    parser.add_argument("--debug", action="store_true", default=DEBUG,
                        help="Draw the tree after every step")
    parser.add_argument("--verbose", action="store_true",
                        help="Log simulation phases")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        config = SimulationConfig(
            size=args.size,
            seed=args.seed,
            iterations=args.iterations,
            debug=args.debug,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    result = run_simulation(config)
    print()
    print(f"time elapsed: {result.time_per_iteration:g}")
    print(f"size: {node_footprint(config.size)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

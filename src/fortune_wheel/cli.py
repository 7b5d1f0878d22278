"""
Headless spin demo.
src/fortune_wheel/cli.py

Spins a wheel in real time against a simulated result provider and logs
collisions and the landing slice. Two flows, mirroring how a client uses
the controller:
  - fetch then spin:   provider first, then spin_to_result
  - spin while fetch:  continuous spin, provider, land on the result
"""

import argparse
import asyncio
import logging
import random
import sys

from .configuration import SpinSettings, WheelConfiguration
from .lib.config_loader import load_config
from .slices import Slice
from .spin import SpinController

logger = logging.getLogger(__name__)


def make_result_provider(slice_count, delay_sec, fixed_index=None, rng=None):
    """Simulated backend: waits `delay_sec`, then returns a winning index."""
    rng = rng or random.Random()

    async def provider():
        await asyncio.sleep(delay_sec)
        index = fixed_index if fixed_index is not None else rng.randrange(slice_count)
        logger.info(f"[Provider] Result: {index}")
        return index

    return provider


async def run_demo(args):
    config = load_config(args.config)
    configuration = WheelConfiguration.from_dict(config.get("wheel") or {})
    settings = SpinSettings.from_dict(config.get("spin") or {})

    slices = [Slice.text(f"Prize {i + 1}", data=i) for i in range(args.slices)]
    counts = {"edge": 0, "center": 0}

    def on_edge(progress):
        counts["edge"] += 1

    def on_center(progress):
        counts["center"] += 1

    controller = SpinController(
        slices,
        configuration=configuration,
        settings=settings,
        on_edge_collision=on_edge,
        on_center_collision=on_center,
        edge_collision_detection=True,
        center_collision_detection=True,
        record_events=args.record_events,
    )

    provider = make_result_provider(
        args.slices, args.fetch_delay, args.index, random.Random(args.seed)
    )

    if args.mode == "continuous":
        landed = await controller.spin_while_fetching(
            provider,
            rotations_per_second=args.rate,
            deceleration_duration=args.duration,
        )
    else:
        landed = await controller.spin_to_result(
            provider,
            full_rotations=args.rotations,
            duration=args.duration,
        )

    logger.info(
        f"Landed on {landed} ({slices[landed].contents[0].text}), "
        f"edges={counts['edge']} centers={counts['center']}"
    )
    return landed


def main(argv=None):
    parser = argparse.ArgumentParser(description='Fortune wheel headless spin demo')
    parser.add_argument('--slices', '-n', type=int, default=8, help='Number of slices (default: 8)')
    parser.add_argument('--mode', choices=['fetch', 'continuous'], default='continuous',
                        help='fetch then spin, or spin while fetching (default: continuous)')
    parser.add_argument('--index', '-i', type=int, default=None, help='Force the winning index')
    parser.add_argument('--rotations', type=int, default=None, help='Full turns for fetch mode')
    parser.add_argument('--rate', type=float, default=2.0, help='Continuous turns per second (default: 2)')
    parser.add_argument('--duration', type=float, default=None, help='Spin/landing duration in seconds')
    parser.add_argument('--fetch-delay', type=float, default=1.0, help='Simulated provider latency (s)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the provider')
    parser.add_argument('--config', '-c', default=None, help='YAML config file')
    parser.add_argument('--record-events', action='store_true', help='Write logs/spin_events.log')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        asyncio.run(run_demo(args))
    except (ValueError, RuntimeError) as e:
        logger.error(f"Spin failed: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

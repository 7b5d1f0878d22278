"""Headless demo CLI: both flows end to end on the real asyncio ticker"""
import sys
import os
import asyncio
import random

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fortune_wheel.cli import main, make_result_provider


def test_provider_fixed_index():
    provider = make_result_provider(8, 0, fixed_index=5)
    assert asyncio.run(provider()) == 5


def test_provider_random_in_range():
    provider = make_result_provider(6, 0, rng=random.Random(1))
    for _ in range(10):
        assert 0 <= asyncio.run(provider()) < 6


def test_continuous_flow():
    assert main([
        "--slices", "6", "--index", "4", "--fetch-delay", "0",
        "--rate", "20", "--duration", "0.05",
    ]) == 0


def test_fetch_flow():
    assert main([
        "--mode", "fetch", "--slices", "4", "--index", "2", "--fetch-delay", "0",
        "--rotations", "1", "--duration", "0.05",
    ]) == 0


def test_bad_result_index_fails():
    assert main(["--slices", "6", "--index", "9", "--fetch-delay", "0", "--rate", "20"]) == 1

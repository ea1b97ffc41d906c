"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import random

import pytest

import logger as logger_lib


@pytest.fixture(autouse=True)
def fresh_logger():
    """Every test gets handlers bound to its own captured stderr."""
    logger_lib.reset_logger()
    yield
    logger_lib.reset_logger()


@pytest.fixture
def small_lists():
    """The worked example: two people, two advertisers."""
    return ["Anna", "Bob"], ["Cat", "Dog"]


def as_text(names):
    return "".join(name + "\n" for name in names)


@pytest.fixture
def input_files(tmp_path):
    """Write advertisers and people files, returns their paths."""

    def _write(advertisers, people):
        adv_path = tmp_path / "advertisers.txt"
        people_path = tmp_path / "people.txt"
        adv_path.write_text(as_text(advertisers), encoding="utf-8")
        people_path.write_text(as_text(people), encoding="utf-8")
        return adv_path, people_path

    return _write


def random_names(rng, n):
    alphabet = "abcdeiouxyz "
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 7)))
        for _ in range(n)
    ]


@pytest.fixture
def random_instances():
    """Small random (people, advertisers) instances, reproducible."""
    rng = random.Random(20240601)
    instances = []
    for _ in range(200):
        people = random_names(rng, rng.randint(0, 6))
        advertisers = random_names(rng, rng.randint(0, 6))
        instances.append((people, advertisers))
    return instances

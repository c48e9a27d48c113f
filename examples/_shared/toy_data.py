"""
Toy trip records for examples.
"""
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

STATES = ["NY", "TX", "VA", "FL", "CA"]

TUTORIAL_TRIPS = [("NY", 2300), ("TX", 2500), ("VA", 5600), ("FL", 6700), ("CA", 5400)]


@dataclass(frozen=True)
class Trip:
    distance: int
    state: str


def tutorial_trips() -> List[Trip]:
    """The five trips used throughout the collector walkthrough."""
    return [Trip(distance, state) for state, distance in TUTORIAL_TRIPS]


def build_trips(n_trips: int, rng: Optional[np.random.Generator] = None) -> List[Trip]:
    """
    Generate random trips.

    Args:
        n_trips: Number of trips.
        rng: Random number generator.

    Returns:
        List of Trip records with integer distances in [100, 8000).
    """
    if rng is None:
        rng = np.random.default_rng()

    states = rng.choice(STATES, size=n_trips)
    distances = rng.integers(100, 8000, size=n_trips)
    return [Trip(int(d), str(s)) for s, d in zip(states, distances)]

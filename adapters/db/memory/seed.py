"""Demonstration dataset loaded into a fresh in-memory store."""

from __future__ import annotations

from typing import List

from domains.blueprints.models import Blueprint


def demo_blueprints() -> List[Blueprint]:
    """Return new instances of the demo blueprints.

    Four distinct authors; ``john`` owns two entries so author lookups have
    something to group.
    """

    return [
        Blueprint.from_pairs("_authorname_", "_bpname_", [(140, 140), (115, 115)]),
        Blueprint.from_pairs(
            "john",
            "house_design",
            [
                (10, 10), (10, 100), (100, 100),
                (100, 10), (10, 10), (50, 10),
                (50, 50), (80, 50), (80, 80),
            ],
        ),
        Blueprint.from_pairs(
            "john",
            "office_design",
            [
                (0, 0), (0, 80), (120, 80),
                (120, 0), (0, 0), (30, 20),
                (30, 60), (90, 60), (90, 20), (30, 20),
            ],
        ),
        Blueprint.from_pairs(
            "maria",
            "park_design",
            [
                (5, 5), (5, 95), (95, 95),
                (95, 5), (5, 5), (25, 25),
                (75, 25), (75, 75), (25, 75), (25, 25),
            ],
        ),
        Blueprint.from_pairs(
            "carlos",
            "bridge_design",
            [
                (0, 50), (20, 45), (40, 40),
                (60, 40), (80, 45), (100, 50),
                (80, 55), (60, 60), (40, 60),
                (20, 55), (0, 50),
            ],
        ),
    ]

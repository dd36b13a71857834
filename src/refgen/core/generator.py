"""Unique code generation from a pattern and a charset."""

import random

from .models import Config
from .pattern import WILDCARD
from ..utils import capacity_of, fits


class NonFeasibleConfig(Exception):
    """Raised when the pattern cannot hold the requested number of unique codes."""

    def __init__(self, capacity: int, count: int):
        self.capacity = capacity
        self.count = count
        super().__init__(
            f"Cannot generate {count} unique codes: pattern capacity is {capacity}"
        )


def capacity(config: Config) -> int:
    """Number of distinct codes the config's pattern and charset can produce."""
    return capacity_of(config.charset.cardinality(), config.pattern.wildcard_count())


def is_feasible(config: Config) -> bool:
    return fits(
        config.charset.cardinality(), config.pattern.wildcard_count(), config.count
    )


class Generator:
    """Fills templates and collects unique codes."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.counts = {
            "attempts": 0,
            "accepted": 0,
            "rejected": 0,
        }

    def generate_one(self, config: Config) -> str:
        """Render one candidate without feasibility or uniqueness checks."""
        chars = []
        for slot in config.pattern.render_template():
            if slot == WILDCARD:
                chars.append(config.charset.sample(self.rng))
            else:
                chars.append(slot)
        return config.prefix + "".join(chars) + config.postfix

    def generate(self, config: Config) -> list[str]:
        """Generate exactly ``config.count`` distinct codes.

        Feasibility is checked before any sampling so the failure does not
        depend on the random source. Order of the result is unspecified.
        """
        self.counts = {k: 0 for k in self.counts}
        if not is_feasible(config):
            raise NonFeasibleConfig(capacity(config), config.count)

        accepted = set()
        while len(accepted) < config.count:
            code = self.generate_one(config)
            self.counts["attempts"] += 1
            if code in accepted:
                self.counts["rejected"] += 1
                continue
            accepted.add(code)
            self.counts["accepted"] += 1
        return list(accepted)


def generate_one(config: Config, rng: random.Random | None = None) -> str:
    return Generator(rng).generate_one(config)


def generate(config: Config, rng: random.Random | None = None) -> list[str]:
    """Generate ``config.count`` unique codes or raise NonFeasibleConfig."""
    return Generator(rng).generate(config)

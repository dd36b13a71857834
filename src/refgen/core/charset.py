"""Character pools used to fill wildcard positions."""

import random
import string
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DIGITS = string.digits
LETTERS = string.ascii_lowercase + string.ascii_uppercase


class EmptyCharsetError(ValueError):
    """Raised when sampling from a charset with no characters."""


class BaseCharset(BaseModel):
    """Common behaviour of all charsets."""

    model_config = ConfigDict(frozen=True)

    @property
    def pool(self) -> str:
        raise NotImplementedError

    def cardinality(self) -> int:
        """Number of symbols available for sampling, duplicates included."""
        return len(self.pool)

    def contains(self, char: str) -> bool:
        return char in self.pool

    def sample(self, rng: random.Random) -> str:
        """Draw one character uniformly over the pool positions."""
        pool = self.pool
        if not pool:
            raise EmptyCharsetError(f"Cannot sample from empty charset: {self.kind}")
        return rng.choice(pool)


class Numeric(BaseCharset):
    kind: Literal["numeric"] = "numeric"

    @property
    def pool(self) -> str:
        return DIGITS


class Alphabetic(BaseCharset):
    kind: Literal["alphabetic"] = "alphabetic"

    @property
    def pool(self) -> str:
        return LETTERS


class Alphanumeric(BaseCharset):
    kind: Literal["alphanumeric"] = "alphanumeric"

    @property
    def pool(self) -> str:
        return LETTERS + DIGITS


class Custom(BaseCharset):
    """Caller supplied pool; repeated characters are sampled more often.

    Repeats still count toward cardinality, so a pool with duplicates
    overstates capacity: ``Custom(pool="aa")`` with one wildcard and a count
    of 2 passes the feasibility check and then never finishes.
    """

    kind: Literal["custom"] = "custom"
    chars: str = Field(default="", alias="pool")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def pool(self) -> str:
        return self.chars


Charset = Annotated[
    Union[Numeric, Alphabetic, Alphanumeric, Custom], Field(discriminator="kind")
]

CHARSET_KINDS = {
    "numeric": Numeric,
    "alphabetic": Alphabetic,
    "alphanumeric": Alphanumeric,
}


def charset_from_name(name: str, pool: str | None = None) -> BaseCharset:
    """Build a charset from its kind name, as used by the CLI."""
    if name == "custom":
        return Custom(pool=pool or "")
    if pool is not None:
        raise ValueError(f"A custom pool cannot be combined with charset: {name}")
    try:
        return CHARSET_KINDS[name]()
    except KeyError:
        raise ValueError(f"Unknown charset: {name}") from None

"""Templates describing literal and random-fill positions."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

WILDCARD = "#"


class BasePattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    def wildcard_count(self) -> int:
        raise NotImplementedError

    def render_template(self) -> str:
        raise NotImplementedError


class FixedLength(BasePattern):
    """A code made only of wildcard positions."""

    kind: Literal["length"] = "length"
    length: int = Field(ge=0)

    def wildcard_count(self) -> int:
        return self.length

    def render_template(self) -> str:
        return WILDCARD * self.length


class Template(BasePattern):
    """An explicit template where ``#`` is filled and everything else is kept.

    There is no escape for a literal ``#``; put such text in the config's
    prefix or postfix instead.
    """

    kind: Literal["template"] = "template"
    template: str

    def wildcard_count(self) -> int:
        return self.template.count(WILDCARD)

    def render_template(self) -> str:
        return self.template


Pattern = Annotated[Union[FixedLength, Template], Field(discriminator="kind")]

"""Pydantic model for generation configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .charset import CHARSET_KINDS, Alphanumeric, Charset
from .pattern import FixedLength, Pattern


class Config(BaseModel):
    """Immutable bundle of pattern, count and charset.

    The ``with_*`` setters return a new Config with only their own field changed.
    """

    model_config = ConfigDict(frozen=True)

    pattern: Pattern = Field(default_factory=lambda: FixedLength(length=8))
    count: int = Field(default=1, ge=0)
    charset: Charset = Field(default_factory=Alphanumeric)
    prefix: str = ""
    postfix: str = ""

    @field_validator("pattern", mode="before")
    @classmethod
    def _expand_pattern(cls, value):
        # 8 -> FixedLength, "REF-####" -> Template
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return {"kind": "length", "length": value}
        if isinstance(value, str):
            return {"kind": "template", "template": value}
        return value

    @field_validator("charset", mode="before")
    @classmethod
    def _expand_charset(cls, value):
        # "numeric" -> Numeric, {"custom": "ABC"} -> Custom
        if isinstance(value, str):
            if value not in CHARSET_KINDS:
                raise ValueError(f"Unknown charset: {value}")
            return {"kind": value}
        if isinstance(value, dict) and "kind" not in value and "custom" in value:
            return {"kind": "custom", "pool": value["custom"]}
        return value

    def _replace(self, **changes) -> "Config":
        # model_copy skips validation, so rebuild through model_validate
        return self.model_validate({**self.model_dump(by_alias=True), **changes})

    def with_pattern(self, pattern) -> "Config":
        return self._replace(pattern=pattern)

    def with_count(self, count: int) -> "Config":
        return self._replace(count=count)

    def with_charset(self, charset) -> "Config":
        return self._replace(charset=charset)

    def with_prefix(self, prefix: str) -> "Config":
        return self._replace(prefix=prefix)

    def with_postfix(self, postfix: str) -> "Config":
        return self._replace(postfix=postfix)

"""
Options - Immutable option records for selector building and serialization.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from elementsnatch.config import (
    DEFAULT_INCLUDE_NTH_CHILD,
    DEFAULT_INCLUDE_TAG_IF_NO_CLASSES,
    DEFAULT_INDENT,
    DEFAULT_MAX_NODES,
    DEFAULT_SKIP_TAG_NAMES,
    DEFAULT_USE_CLASSES,
    DEFAULT_USE_IDS,
    EscapeMode,
)
from elementsnatch.exceptions import ConfigurationError


class SelectorOptions(BaseModel):
    """Options controlling how a single selector token is built."""

    model_config = ConfigDict(frozen=True)

    use_ids: bool = DEFAULT_USE_IDS
    use_classes: bool = DEFAULT_USE_CLASSES
    include_tag_if_no_classes: bool = DEFAULT_INCLUDE_TAG_IF_NO_CLASSES
    include_nth_child: bool = DEFAULT_INCLUDE_NTH_CHILD
    escape_mode: EscapeMode = "cssom"

    @classmethod
    def build(cls, **kwargs):
        """Construct options, raising ConfigurationError on invalid values."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e


class SerializeOptions(SelectorOptions):
    """
    Options for nested-tree serialization.

    max_depth=None means unbounded; the walk is then limited by max_nodes
    and the depth of the document itself.
    """

    indent: str = DEFAULT_INDENT
    max_depth: int | None = Field(default=None, ge=0)
    max_nodes: int = Field(default=DEFAULT_MAX_NODES, ge=0)
    skip_tag_names: frozenset[str] = DEFAULT_SKIP_TAG_NAMES

    @field_validator("skip_tag_names", mode="before")
    @classmethod
    def _upper_tag_names(cls, value):
        if value is None:
            return frozenset()
        return frozenset(str(name).upper() for name in value)

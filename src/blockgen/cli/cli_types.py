# topmark:header:start
#
#   project      : BlockGen
#   file         : cli_types.py
#   file_relpath : src/blockgen/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Click parameter types and output formats shared by BlockGen commands."""

from __future__ import annotations

from enum import Enum
from typing import Generic, NoReturn, TypeVar, cast

import click

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      TEXT: Human-friendly text output.
      JSON: A single JSON object (machine-readable, never colored).
    """

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in self.enum_cls
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

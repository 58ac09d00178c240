"""Abstract Rust declarations produced by the builders and consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class FieldDecl:
    name: str
    type: str
    vis: str | None = "pub"


@dataclass(frozen=True)
class StructDecl:
    """A struct with its derives, doc line and ordered members."""

    name: str
    fields: list[FieldDecl] = field(default_factory=list)
    derives: list[str] = field(default_factory=list)
    doc: str | None = None
    vis: str | None = "pub"

    @property
    def field_names(self) -> list[str]:
        return [item.name for item in self.fields]


@dataclass(frozen=True)
class Argument:
    name: str
    type: str


@dataclass(frozen=True)
class Block:
    """Braced block such as ``Self { ... }`` or ``if cond { ... }``."""

    header: str
    body: list["Statement"] = field(default_factory=list)


Statement = Union[str, Block]


@dataclass(frozen=True)
class FunctionDecl:
    name: str
    args: list[Argument] = field(default_factory=list)
    ret: str | None = None
    body: list[Statement] = field(default_factory=list)
    vis: str | None = "pub"
    is_async: bool = False
    self_ref: bool = False

    @property
    def arg_names(self) -> list[str]:
        return [item.name for item in self.args]


@dataclass(frozen=True)
class ImplBlock:
    target: str
    functions: list[FunctionDecl] = field(default_factory=list)
    trait: str | None = None

    def function(self, name: str) -> FunctionDecl:
        for item in self.functions:
            if item.name == name:
                return item
        raise KeyError(name)


Declaration = Union[StructDecl, ImplBlock]

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ValueType(str, Enum):
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class Literal:
    value: str
    kind: ValueType


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


Expr = Union[Literal, Identifier]


@dataclass(frozen=True, slots=True)
class VarDecl:
    type: ValueType
    name: str
    init: Expr | None = None


@dataclass(frozen=True, slots=True)
class Program:
    decls: list[VarDecl]

    def __iter__(self) -> Iterator[VarDecl]:
        return iter(self.decls)

    def __len__(self) -> int:
        return len(self.decls)

    def __getitem__(self, index: int) -> VarDecl:
        return self.decls[index]

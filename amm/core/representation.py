"""Format-independent nodes of a generated menu.

Menu.representations() returns these in output order; a Transformer turns
each one into a line of the target menu syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from amm.core.transformer import Transformer


class _Node:
    def accept(self, transformer: "Transformer") -> str:
        return transformer.transform(self)


@dataclass(frozen=True)
class MenuStart(_Node):
    pass


@dataclass(frozen=True)
class MenuEnd(_Node):
    pass


@dataclass(frozen=True)
class SubcategoryStart(_Node):
    name: str
    icon: str


@dataclass(frozen=True)
class SubcategoryEnd(_Node):
    name: str


@dataclass(frozen=True)
class Program(_Node):
    name: str
    icon: str
    executable: str


Representation = Union[MenuStart, MenuEnd, SubcategoryStart, SubcategoryEnd, Program]

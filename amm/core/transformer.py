"""Renderers turning representation nodes into menu file text."""

from __future__ import annotations

from typing import Iterable

from amm.core.representation import (
    MenuEnd,
    MenuStart,
    Program,
    Representation,
    SubcategoryEnd,
    SubcategoryStart,
)

_ENTITIES = {
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}


def encode(text: str) -> str:
    """Escape markup characters to their entity equivalents."""
    return "".join(_ENTITIES.get(ch, ch) for ch in text)


def strip_field_code(command: str) -> str:
    """Drop one trailing field code such as %f, %U or %i from an Exec command.

    A trailing %% is an escaped literal percent sign and stays.
    """
    parts = command.rsplit(None, 1)
    if len(parts) == 2 and parts[1].startswith("%") and parts[1] != "%%":
        return parts[0]
    return command


class Transformer:
    """Base renderer; subclasses implement one method per node kind."""

    def transform(self, node: Representation) -> str:
        match node:
            case MenuStart():
                return self.menu_start(node)
            case MenuEnd():
                return self.menu_end(node)
            case SubcategoryStart():
                return self.subcategory_start(node)
            case SubcategoryEnd():
                return self.subcategory_end(node)
            case Program():
                return self.program(node)
        raise TypeError(f"Unknown representation: {node!r}")

    def render(self, representations: Iterable[Representation]) -> str:
        return "\n".join(node.accept(self) for node in representations) + "\n"

    def menu_start(self, node: MenuStart) -> str:
        raise NotImplementedError

    def menu_end(self, node: MenuEnd) -> str:
        raise NotImplementedError

    def subcategory_start(self, node: SubcategoryStart) -> str:
        raise NotImplementedError

    def subcategory_end(self, node: SubcategoryEnd) -> str:
        raise NotImplementedError

    def program(self, node: Program) -> str:
        raise NotImplementedError


class JwmTransformer(Transformer):
    """JWM menu syntax: a <JWM> root holding one <Menu> per subcategory."""

    def menu_start(self, node: MenuStart) -> str:
        return "<JWM>"

    def menu_end(self, node: MenuEnd) -> str:
        return "</JWM>"

    def subcategory_start(self, node: SubcategoryStart) -> str:
        return f'  <Menu label="{encode(node.name)}" icon="{encode(node.icon)}">'

    def subcategory_end(self, node: SubcategoryEnd) -> str:
        return "  </Menu>"

    def program(self, node: Program) -> str:
        command = encode(strip_field_code(node.executable))
        return (
            f'    <Program label="{encode(node.name)}" icon="{encode(node.icon)}">'
            f"{command}</Program>"
        )

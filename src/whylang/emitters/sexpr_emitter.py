"""
Renders WhyLang expression trees as parenthesized s-expressions.

This module defines two layers:

    SexprWriter:
        A streaming writer of atoms and nested expressions to any text stream.
        Knows nothing about WhyLang; it only handles separators and indentation.
    SexprEmitter:
        Walks an expression tree and drives a SexprWriter.

Output shape:
    - Constant -> its rendered value as an atom: ``42``, ``"hi"``
    - Call     -> ``(name arg ...)``, e.g. ``print(42, "hi")`` becomes ``(print 42 "hi")``

Indented mode puts every nested expression on its own line, indented two
spaces per level of nesting:

    (a b c
      (d e
        (f g) h)
      (i j))

Raises:
    - `TypeError`: If something other than an expression node is emitted.
"""

import io
from typing import TextIO

from whylang.whylang_ast import Call, Constant, Expression


class SexprWriter:
    """Writes s-expressions to a text stream.

    Attributes:
        indented (bool): Whether nested expressions start on new, indented lines.
    """

    def __init__(self, writer: TextIO, indented: bool = False) -> None:
        self._writer = writer
        self.indented = indented
        self._depth = 0
        self._start_expr = True
        self._written = False

    def start_expression(self) -> None:
        if self.indented and self._depth > 0:
            self._writer.write("\n" + "  " * self._depth)
        elif self.indented and self._written:
            self._writer.write("\n")
        elif not self._start_expr:
            self._writer.write(" ")

        self._writer.write("(")
        self._start_expr = True
        self._written = True
        self._depth += 1

    def end_expression(self) -> None:
        if self._depth == 0:
            raise ValueError("end_expression called without a matching start_expression")
        self._writer.write(")")
        self._depth -= 1
        self._start_expr = False

    def write_atom(self, atom: str) -> None:
        if not self._start_expr:
            self._writer.write(" ")
        self._writer.write(atom)
        self._start_expr = False
        self._written = True


class SexprEmitter:
    """Emits s-expression text for WhyLang expression trees.

    Methods:
        emit(node): Returns the s-expression for one tree.
        emit_all(nodes): Returns the s-expressions for several trees, as siblings.
    """

    def __init__(self, indented: bool = False) -> None:
        self.indented = indented

    def emit(self, node: Expression) -> str:
        return self.emit_all([node])

    def emit_all(self, nodes: list[Expression]) -> str:
        buf = io.StringIO()
        writer = SexprWriter(buf, self.indented)
        for node in nodes:
            self._visit(writer, node)
        return buf.getvalue()

    def _visit(self, writer: SexprWriter, node: Expression) -> None:
        if isinstance(node, Constant):
            writer.write_atom(str(node.value))
        elif isinstance(node, Call):
            writer.start_expression()
            writer.write_atom(node.function)
            for arg in node.arguments:
                self._visit(writer, arg)
            writer.end_expression()
        else:
            raise TypeError(f"Cannot emit {type(node).__name__} as an s-expression")


__all__ = ["SexprEmitter", "SexprWriter"]

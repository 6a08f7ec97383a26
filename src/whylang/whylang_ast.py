"""
Defines the expression tree produced by the WhyLang parser.

Classes:
    Constant:
        A literal: an integer or string token payload.
    Call:
        A function application: a function name and one or more argument expressions.
    ExprDict:
        TypedDict form of a node, for JSON output or debugging.

`Expression` is the closed union of the two node classes. Nodes are immutable,
own their children exclusively and compare structurally, so a tree parsed from
source can be compared directly against one built by hand in a test.

Rendering a node with `str()` gives back source text:

    >>> str(Call("print", [Constant(IntegerValue(42))]))
    'print(42)'
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypedDict, Union

from whylang.whylang_tokens import IntegerValue, StringValue


class ExprDict(TypedDict, total=False):
    """
    TypedDict representation of an expression node used for serialization.

    Fields:
        kind (str): "constant" or "call".
        value (int | str): The literal of a constant.
        type (str): "integer" or "string" for a constant.
        function (str): The callee name of a call.
        arguments (list[ExprDict]): The arguments of a call, in order.
    """

    kind: str
    value: Any
    type: str
    function: str
    arguments: list["ExprDict"]


@dataclass(frozen=True)
class Constant:
    value: IntegerValue | StringValue

    def __post_init__(self) -> None:
        if not isinstance(self.value, (IntegerValue, StringValue)):
            raise TypeError(f"Constant requires an integer or string value, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)

    def to_dict(self) -> ExprDict:
        if isinstance(self.value, IntegerValue):
            return {"kind": "constant", "type": "integer", "value": self.value.value}
        return {"kind": "constant", "type": "string", "value": self.value.text}


@dataclass(frozen=True, init=False)
class Call:
    """A call of `function` with positional `arguments`.

    Args:
        function (str): The callee's identifier text.
        arguments (Iterable[Expression]): Argument nodes, stored as a tuple.
    """

    function: str
    arguments: tuple["Expression", ...] = ()

    def __init__(self, function: str, arguments: Iterable["Expression"] = ()) -> None:
        object.__setattr__(self, "function", function)
        object.__setattr__(self, "arguments", tuple(arguments))
        for arg in self.arguments:
            if not isinstance(arg, (Constant, Call)):
                raise TypeError(f"Call arguments must be expressions, got {arg!r}")

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.arguments)
        return f"{self.function}({args})"

    def to_dict(self) -> ExprDict:
        return {
            "kind": "call",
            "function": self.function,
            "arguments": [arg.to_dict() for arg in self.arguments],
        }


Expression = Union[Constant, Call]


__all__ = ["Call", "Constant", "ExprDict", "Expression"]

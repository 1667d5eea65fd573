"""
Type-shape resolver.

Turns a schema Shape into the text of a type expression in the
declaration language. Inline objects are rendered over several lines and
need to know the depth at which they start.
"""

from __future__ import annotations

from ..naming import quote_property_name
from ..schema_ast.nodes import ArrayShape, ObjectShape, PrimitiveShape, PropertyDef, RefShape, Shape

ANY_TYPE = "any"


class TypeShapeResolver:
    """Resolves shapes to type expressions.

    Args:
        indent: The indentation unit, shared with the TextBuilder of the pass
    """

    def __init__(self, indent: str = "    "):
        self.indent = indent

    def property_def(self, prop: PropertyDef, depth: int = 0) -> str:
        """Render "name?: type" for a property (without the trailing semicolon)."""
        marker = "?" if prop.optional else ""
        return f"{quote_property_name(prop.name)}{marker}: {self.resolve(prop.shape, depth)}"

    def resolve(self, shape: Shape, depth: int = 0) -> str:
        """
        Resolve a shape to its type expression.

        Args:
            shape: The shape to render
            depth: Block depth of the line the expression starts on

        Returns:
            The type expression; multi-line for inline objects
        """
        if isinstance(shape, RefShape):
            return shape.target

        if isinstance(shape, ArrayShape):
            items = ANY_TYPE if shape.items is None else self.resolve(shape.items, depth)
            return f"{items}[]"

        if isinstance(shape, ObjectShape):
            if shape.properties is None:
                return ANY_TYPE
            return self._resolve_inline_object(shape.properties, depth)

        if isinstance(shape, PrimitiveShape):
            if shape.kind == "string" and shape.enum is not None:
                return "(" + " | ".join(f"'{value}'" for value in shape.enum) + ")"
            return shape.kind

        # Fallback
        return ANY_TYPE

    def _resolve_inline_object(self, properties: tuple[PropertyDef, ...], depth: int) -> str:
        inner = self.indent * (depth + 1)
        lines = ["{\n"]
        for prop in properties:
            lines.append(f"{inner}{self.property_def(prop, depth + 1)};\n")
        lines.append(f"{self.indent * depth}}}")
        return "".join(lines)

from __future__ import annotations

MAX_PROPERTY_NAME_LENGTH = 19

SHAPE_PROPERTIES = {
    'rectangle': ('id', 'color', 'x', 'y', 'width', 'height'),
    'circle': ('id', 'color', 'x', 'y', 'radius'),
    'triangle': ('id', 'color', 'ax', 'ay', 'bx', 'by', 'cx', 'cy'),
}

HEX_PROPERTIES = {'color'}


class Property:
    def __init__(self, name: str, value: int = 0):
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"Property({self.name!r}, {self.value})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self.name == other.name and self.value == other.value


def property_base(name: str) -> int:
    return 16 if name in HEX_PROPERTIES else 10


def is_name_too_long(name: str) -> bool:
    return len(name) > MAX_PROPERTY_NAME_LENGTH


def find_property(properties: list[Property], name: str, default: int = None) -> int | None:
    # first occurrence wins when a line repeats a name
    for prop in properties:
        if prop.name == name:
            return prop.value
    return default


def get_required_properties(shape: str) -> tuple[str, ...] | None:
    return SHAPE_PROPERTIES.get(shape)

from __future__ import annotations
from typing import Iterable
from attributes import (Property, find_property, get_required_properties,
                        is_name_too_long, property_base)
from errors import (InvalidInputError, InvalidLineError, ParseError,
                    PropertyNameTooLongError)
from geometry import Circle, Command, Rectangle, Triangle, parse_integer_literal
from scene_state import Scene

SHAPE_CLASSES = {
    'rectangle': Rectangle,
    'circle': Circle,
    'triangle': Triangle,
}


def tokenize_line(line: str) -> list[str]:
    """Split a scene line into tokens.

    Runs of spaces separate tokens and every ``=`` is a token of its own, so
    ``x="10"`` and ``x = "10"`` both give ``['x', '=', '"10"']``.
    """
    tokens = []
    accumulator = ""

    for char in line.rstrip('\r\n'):
        if char == ' ':
            if accumulator:
                tokens.append(accumulator)
                accumulator = ""
        elif char == '=':
            if accumulator:
                tokens.append(accumulator)
                accumulator = ""
            tokens.append('=')
        else:
            accumulator += char

    if accumulator:
        tokens.append(accumulator)

    return tokens


def unquote_value(token: str) -> str:
    if len(token) <= 2 or not token.startswith('"') or not token.endswith('"'):
        raise InvalidInputError(f"value must be a quoted number: {token}")
    return token[1:-1]


def parse_value(name: str, token: str) -> int:
    base = property_base(name)
    value = parse_integer_literal(unquote_value(token), base)
    if value is None:
        raise InvalidInputError(f"invalid base {base} value for {name}: {token}")
    return value


def parse_properties(tokens: list[str]) -> tuple[str, list[Property]]:
    if not tokens:
        raise InvalidLineError("line contains no tokens")

    keyword = tokens[0]
    if is_name_too_long(keyword):
        raise PropertyNameTooLongError(f"shape name too long: {keyword}")

    properties = []
    index = 1
    while index < len(tokens):
        name = tokens[index]
        if is_name_too_long(name):
            raise PropertyNameTooLongError(f"property name too long: {name}")

        if index + 1 >= len(tokens) or tokens[index + 1] != '=':
            raise InvalidInputError(f"expected '=' after {name}")
        if index + 2 >= len(tokens):
            raise InvalidInputError(f"missing value for {name}")

        properties.append(Property(name, parse_value(name, tokens[index + 2])))
        index += 3

    return keyword, properties


def build_command(keyword: str, properties: list[Property]) -> Command:
    required = get_required_properties(keyword)
    if required is None:
        raise InvalidInputError(f"unknown shape: {keyword}")

    values = {}
    for name in required:
        value = find_property(properties, name)
        if value is None:
            raise InvalidInputError(f"{keyword} is missing property {name}")
        values[name] = value

    return SHAPE_CLASSES[keyword](**values)


def parse_line(line: str) -> Command:
    keyword, properties = parse_properties(tokenize_line(line))
    return build_command(keyword, properties)


def parse_scene(lines: Iterable[str]) -> Scene:
    scene = Scene()

    for line_number, line in enumerate(lines, start=1):
        if not line.rstrip('\r\n'):
            continue

        try:
            scene.insert(parse_line(line))
        except ParseError as e:
            e.at_line(line_number)
            raise

    return scene


def parse_scene_file(path: str) -> Scene:
    with open(path, 'r', encoding='utf-8') as file:
        return parse_scene(file)

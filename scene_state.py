from __future__ import annotations
from errors import DuplicateIdentifierError, UnrecognizedError
from geometry import SHAPE_TYPES, Circle, Command, Rectangle, Triangle


class Scene:
    """Drawing commands of one input file, kept in ascending id order."""

    def __init__(self, commands: list[Command] = None):
        self.commands: list[Command] = []
        for command in commands or []:
            self.insert(command)

    def insert(self, command: Command) -> int:
        """Insert ``command`` before the first command with a greater id.

        Returns the insertion index. Raises DuplicateIdentifierError if the
        id is already present; the scene is left as it was.
        """
        if not isinstance(command, SHAPE_TYPES):
            raise UnrecognizedError(f"not a drawing command: {command!r}")

        index = 0
        for existing in self.commands:
            if command.id < existing.id:
                break
            if command.id == existing.id:
                raise DuplicateIdentifierError(command.id)
            index += 1

        self.commands.insert(index, command)
        return index

    @property
    def ids(self) -> list[int]:
        return [command.id for command in self.commands]

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __getitem__(self, index: int) -> Command:
        return self.commands[index]

    def summary_lines(self) -> list[str]:
        lines = [f"Commands: {len(self.commands)}"]
        if not self.commands:
            return lines

        counts = {
            'rectangle': sum(1 for c in self.commands if isinstance(c, Rectangle)),
            'circle': sum(1 for c in self.commands if isinstance(c, Circle)),
            'triangle': sum(1 for c in self.commands if isinstance(c, Triangle)),
        }
        for shape, count in counts.items():
            if count:
                lines.append(f"  {shape}: {count}")
        lines.append(f"IDs: {self.commands[0].id}..{self.commands[-1].id}")
        return lines

    def print_summary(self):
        for line in self.summary_lines():
            print(line)

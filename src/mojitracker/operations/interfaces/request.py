from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Request:
    """
    A tracker command and its arguments, ready to be written to the wire.

    Argument order follows insertion order. Parameters that do not apply to
    a request are left out of ``arguments`` entirely rather than being sent
    with an empty value.
    """

    command: str
    arguments: Dict[str, str] = field(default_factory=dict)

    def get_command(self) -> str:
        """The tracker verb, e.g. 'create_open'"""
        return self.command

    def get_arguments(self) -> Dict[str, str]:
        """Arguments in the order they are written to the wire"""
        return self.arguments

    def __str__(self) -> str:
        return f"Request(command='{self.command}', arguments={self.arguments})"

from dataclasses import dataclass, field
from typing import Any, Dict

from projexts.errors import StorageError

# Stored layout of a single entry:
# {
#     "project_name": "api",
#     "run_command": ["/home/me/code/api/run.sh", "--reload"],
# }


@dataclass
class Shortcut:
    name: str
    command: list[str] = field(default_factory=list)

    @property
    def program(self) -> str:
        return self.command[0]

    @property
    def args(self) -> list[str]:
        return self.command[1:]

    def display_command(self) -> str:
        return " ".join(self.command)

    def to_dict(self) -> Dict[str, Any]:
        return {"project_name": self.name, "run_command": list(self.command)}

    @classmethod
    def from_dict(cls, data: Any) -> "Shortcut":
        if not isinstance(data, dict):
            raise StorageError(f"Shortcut entry must be an object, got {type(data).__name__}")
        if "project_name" not in data or "run_command" not in data:
            raise StorageError("Shortcut entry requires 'project_name' and 'run_command'")

        name = data["project_name"]
        command = data["run_command"]
        if not isinstance(name, str):
            raise StorageError("'project_name' must be a string")
        if not isinstance(command, list) or not all(isinstance(t, str) for t in command):
            raise StorageError(f"'run_command' of '{name}' must be a list of strings")

        return cls(name=name, command=list(command))

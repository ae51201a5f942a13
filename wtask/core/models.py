"""
Domain models for wtask.

A config file maps short aliases to tasks; the parsed result is a TaskTable.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Task:
    """A single shell command line bound to an alias."""
    name: str = ""
    description: str = ""
    run: str = ""

    def label(self, alias: str) -> str:
        """Menu label, e.g. ``gg - Node.js Version``."""
        return f"{alias} - {self.name}"


# alias -> Task, in file order
TaskTable = Dict[str, Task]

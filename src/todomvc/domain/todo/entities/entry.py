from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Entry:
    description: str
    completed: bool = False
    editing: bool = False

    def toggled(self) -> Entry:
        return replace(self, completed=not self.completed)

    def with_completed(self, completed: bool) -> Entry:
        return replace(self, completed=completed)

    def with_editing(self, editing: bool) -> Entry:
        return replace(self, editing=editing)

"""Scoped variable storage with name and slot lookups."""

from __future__ import annotations

from typing import Dict, List, Optional

from glang.builtins.registry import get_builtins
from glang.objects import NullValue, Object


class Environment:
    """A scope holding variables by name and by numbered slot.

    Slots give direct access to parameters and locals; names cover builtins,
    globals and variables captured from enclosing scopes. Lookups that miss
    continue in the parent scope.
    """

    def __init__(self, parent: Optional["Environment"] = None, num_slots: int = 0) -> None:
        self.store: Dict[str, Object] = {}
        self.slots: List[Object] = [NullValue() for _ in range(num_slots)]
        self.parent = parent

    @classmethod
    def with_builtins(cls) -> "Environment":
        """A root scope holding every builtin function."""
        env = cls()
        env.store.update(get_builtins())
        return env

    def set(self, name: str, value: Object, slot: Optional[int] = None) -> None:
        """Bind a variable.

        With a slot the value goes to both the slot and the name store, so
        closures can still find it by name. Without one an existing binding
        in this scope or an enclosing one is updated, else a new one is made
        here.
        """
        if slot is not None:
            self.set_slot(slot, value)
            self.store[name] = value
            return
        self.set_by_name(name, value)

    def set_by_name(self, name: str, value: Object) -> None:
        """Bind a variable by name only, updating the scope that holds it."""
        if name not in self.store and self.parent is not None and self.parent.has_var(name):
            self.parent.set_by_name(name, value)
            return
        self.store[name] = value

    def set_slot(self, slot: int, value: Object) -> None:
        """Write a slot, growing the slot list with nulls if needed."""
        if slot < 0:
            raise ValueError(f"slot index {slot} is negative")
        self.ensure_slots(slot + 1)
        self.slots[slot] = value

    def ensure_slots(self, min_slots: int) -> None:
        """Grow the slot list to at least ``min_slots`` entries."""
        missing = min_slots - len(self.slots)
        if missing > 0:
            self.slots.extend(NullValue() for _ in range(missing))

    def get_slot(self, slot: int) -> Optional[Object]:
        """The value in a slot, or None when the slot does not exist."""
        if 0 <= slot < len(self.slots):
            return self.slots[slot]
        return None

    def has_var(self, name: str) -> bool:
        """Whether a name is bound here or in an enclosing scope."""
        if name in self.store:
            return True
        return self.parent is not None and self.parent.has_var(name)

    def get(self, name: str, slot: Optional[int] = None) -> Optional[Object]:
        """Look a variable up by slot first, then by name through the scopes."""
        if slot is not None:
            found = self.get_slot(slot)
            if found is not None:
                return found
        if name in self.store:
            return self.store[name]
        if self.parent is not None:
            return self.parent.get(name, slot)
        return None

    def get_by_name(self, name: str) -> Optional[Object]:
        """Look a variable up by name only, through the enclosing scopes."""
        if name in self.store:
            return self.store[name]
        if self.parent is not None:
            return self.parent.get_by_name(name)
        return None
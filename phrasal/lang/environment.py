"""Variable state for a phrasal program.

A program has three kinds of variables (string, integer and decimal) and a name is allowed to hold a value of more
than one kind at the same time, e.g. after `token(nu.x)` followed by `x == "hi"`. Every name therefore owns one slot
per kind. Reading a variable for display picks the first kind that has a slot, in LOOKUP_ORDER.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ValueKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"


LOOKUP_ORDER = (ValueKind.STRING, ValueKind.INTEGER, ValueKind.DECIMAL)

DEFAULTS = {
    ValueKind.STRING: "",
    ValueKind.INTEGER: 0,
}


@dataclass(frozen=True)
class Value:
    kind: ValueKind
    data: Union[str, int, float]


class Environment:
    """Owns every variable of a single interpreter run. Entries are created on first write and never deleted."""

    def __init__(self):
        self.slots = {}  # dict of name: {ValueKind: Value}

    def declare(self, name, kind):
        """Registers name with the default value for kind. Kinds without a default are ignored."""
        if kind in DEFAULTS:
            self.set(name, Value(kind, DEFAULTS[kind]))

    def set(self, name, value):
        self.slots.setdefault(name, {})[value.kind] = value

    def get(self, name, kind):
        """Returns the Value of name for kind, or None if name has never been given a value of that kind."""
        return self.slots.get(name, {}).get(kind)

    def has(self, name, kind):
        return self.get(name, kind) is not None

    def lookup(self, name):
        """Returns the first Value of name in LOOKUP_ORDER, or None if name is unknown."""
        for kind in LOOKUP_ORDER:
            value = self.get(name, kind)
            if value is not None:
                return value
        return None

    def __contains__(self, name):
        return name in self.slots

    def __repr__(self):
        return f"Environment({self.slots!r})"

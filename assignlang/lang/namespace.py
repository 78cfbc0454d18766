"""Variable store for a single Session."""

from dataclasses import dataclass


@dataclass
class Binding:
    name: str
    value: int = 0
    initialized: bool = False


class Namespace:
    """Maps variable names to Bindings. Only successful assignments (set) ever create or change a binding, so every
    stored binding is initialized. Enumeration follows order of first assignment (dicts are insertion-ordered).
    """

    def __init__(self):
        self._bindings = {}  # dict of name: Binding

    def set(self, name, value):
        """Creates or overwrites the binding for name and marks it initialized."""
        binding = self._bindings.setdefault(name, Binding(name))
        binding.value = value
        binding.initialized = True

    def get(self, name):
        """Returns (value, initialized). Never fails: a missing name is simply not initialized."""
        binding = self._bindings.get(name, Binding(name))
        return binding.value, binding.initialized

    def enumerate(self):
        """Returns list of (name, value) for initialized bindings, in order of first assignment."""
        return [(binding.name, binding.value) for binding in self._bindings.values() if binding.initialized]

    def __contains__(self, name):
        return self.get(name)[1]

    def __len__(self):
        return len(self.enumerate())

    def __repr__(self):
        return f"Namespace({dict(self.enumerate())})"

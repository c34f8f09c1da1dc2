"""Containers for classified command-line arguments.

An ``ArgumentState`` owns the three independent collections produced by the
classifier: active switches, named parameters and positional values.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from consoleapp.cli.errors import ArgumentIndexError


@dataclass
class ArgumentState:
    """
    Switches, parameters and values parsed from (or set for) a command line.

    Switch and parameter names are always plain strings; a single character
    is simply a name of length one.

    :param switches: Names of the switches that are turned on
    :type switches: set[str]
    :param params: Parameter names mapped to their values
    :type params: dict[str, str]
    :param values: Positional values in the order they were pushed
    :type values: list[str]
    """

    switches: set[str] = field(default_factory=set)
    params: dict[str, str] = field(default_factory=dict)
    values: list[str] = field(default_factory=list)

    def switch_on(self, name: str) -> None:
        """
        Turn on a switch. Turning on an active switch is a no-op.

        :param name: Switch name, without leading markers
        :type name: str
        """
        self.switches.add(name)

    def switch_off(self, name: str) -> None:
        """
        Turn off a switch. Turning off an inactive switch is a no-op.

        :param name: Switch name, without leading markers
        :type name: str
        """
        self.switches.discard(name)

    def get_switch(self, name: str) -> bool:
        """
        Indicate whether a switch is turned on.

        :param name: Switch name
        :type name: str
        :return: True if the switch is on
        :rtype: bool
        """
        return name in self.switches

    def set_param(self, name: str, value: str) -> None:
        """
        Set a parameter, overwriting any previous value.

        :param name: Parameter name
        :type name: str
        :param value: Parameter value
        :type value: str
        """
        self.params[name] = value

    def get_param(self, name: str) -> str | None:
        """
        Get the value of a parameter.

        :param name: Parameter name
        :type name: str
        :return: The value, or None if the parameter is not set
        :rtype: str | None
        """
        return self.params.get(name)

    def clear_param(self, name: str) -> None:
        """Remove a parameter if present."""
        self.params.pop(name, None)

    def push_value(self, value: str) -> int:
        """
        Push a value onto the end of the value list.

        Values can only be appended, never inserted, so the returned index is
        the caller's handle for reading the value back later. Duplicates are
        allowed.

        :param value: Value to append
        :type value: str
        :return: Zero-based index of the pushed value
        :rtype: int
        """
        self.values.append(value)
        return len(self.values) - 1

    def set_values(self, values: Iterable[str]) -> None:
        """
        Replace the whole value list.

        :param values: New values, in order
        :type values: Iterable[str]
        """
        new_values = list(values)
        self.clear_values()
        for value in new_values:
            self.push_value(value)

    def get_value(self, index: int) -> str:
        """
        Access a value by index.

        :param index: Zero-based index of the value
        :type index: int
        :return: The value at that index
        :rtype: str
        :raises ArgumentIndexError: If index is negative or not below the
            number of values
        """
        if index < 0 or index >= len(self.values):
            raise ArgumentIndexError("value", index, len(self.values))
        return self.values[index]

    def clear_switches(self) -> None:
        self.switches.clear()

    def clear_params(self) -> None:
        self.params.clear()

    def clear_values(self) -> None:
        self.values.clear()

    def reset(self) -> None:
        """Empty all three collections."""
        self.clear_switches()
        self.clear_params()
        self.clear_values()

    def to_dict(self) -> dict[str, Any]:
        """
        Snapshot the state as plain data for reporting.

        :return: Dictionary with sorted ``switches``, ``params`` and ``values``
        :rtype: dict[str, Any]
        """
        return {
            "switches": sorted(self.switches),
            "params": dict(self.params),
            "values": list(self.values),
        }

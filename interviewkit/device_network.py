"""Paths from a central hub to a device in a tree-shaped home network."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Device:
    """A device in the network, with the devices that report to it."""

    name: str
    children: list["Device"] = field(default_factory=list, repr=False)

    def add_child(self, child: "Device") -> None:
        self.children.append(child)


def find_path_iterative(root: Optional[Device], target: str) -> list[str]:
    """Depth-first search with an explicit stack; later children are tried first."""
    if root is None:
        return []
    stack: list[tuple[Device, list[str]]] = [(root, [root.name])]
    while stack:
        node, path = stack.pop()
        if node.name == target:
            return path
        stack.extend((child, [*path, child.name]) for child in node.children)
    return []


def find_path_recursive(root: Optional[Device], target: str) -> list[str]:
    """Recursive depth-first search; earlier children are tried first."""
    path: list[str] = []

    def visit(node: Device) -> bool:
        path.append(node.name)
        if node.name == target:
            return True
        if any(visit(child) for child in node.children):
            return True
        path.pop()
        return False

    if root is not None:
        visit(root)
    return path


def build_sample_hub() -> Device:
    """Build the sample network of rooms and devices."""
    root = Device("Hub")
    living_room = Device("LivingRoom")
    kitchen = Device("Kitchen")
    bedroom = Device("BedRoom")
    for room in (living_room, kitchen, bedroom):
        root.add_child(room)

    thermostat = Device("Thermostat-1")
    living_room.add_child(thermostat)
    living_room.add_child(Device("Light-1"))

    for name in ("Fridge", "Oven", "Light-2"):
        kitchen.add_child(Device(name))

    for name in ("Thermostat-2", "MotionSensor", "Light-3"):
        bedroom.add_child(Device(name))

    thermostat.add_child(Device("TempSensor"))
    return root
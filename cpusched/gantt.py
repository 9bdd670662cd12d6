"""Gantt chart records produced by the schedulers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class ItemType(IntEnum):
    """What the CPU was doing during a chart item."""

    CPU = 0
    IO = 1
    IDLE = 2


@dataclass(frozen=True)
class GanttItem:
    pid: int
    start_time: int
    end_time: int
    item_type: ItemType | int

    @property
    def label(self) -> str:
        if isinstance(self.item_type, ItemType):
            return self.item_type.name
        return "UNKNOWN"


class GanttChart:
    """An ordered list of time slices."""

    def __init__(self) -> None:
        self.items: list[GanttItem] = []

    def add(self, pid: int, start_time: int, end_time: int, item_type: ItemType | int) -> GanttItem:
        """Append an item and return it."""
        try:
            kind: ItemType | int = ItemType(item_type)
        except ValueError:
            kind = item_type
        item = GanttItem(pid, start_time, end_time, kind)
        self.items.append(item)
        return item

    def format(self) -> str:
        """Render the chart as a table."""
        lines = ["Gantt Chart:", "PID\t시작\t종료\t작업", "------------------------"]
        lines.extend(
            f"{item.pid}\t{item.start_time}\t{item.end_time}\t{item.label}" for item in self.items
        )
        return "\n".join(lines) + "\n\n"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[GanttItem]:
        return iter(self.items)
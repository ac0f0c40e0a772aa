"""Window lifecycle notifications.

These are plain data carriers: a windowing backend produces them and an
event dispatcher consumes them. Every variant is a frozen dataclass tagged
with an EventKind member, so dispatch code can switch on ``event.kind``.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, Optional, Tuple


class EventKind(str, Enum):
    OPENED = "opened"
    CLOSED = "closed"
    MOVED = "moved"
    RESIZED = "resized"
    REDRAW_REQUESTED = "redraw_requested"
    CLOSE_REQUESTED = "close_requested"
    FOCUSED = "focused"
    UNFOCUSED = "unfocused"
    FILE_HOVERED = "file_hovered"
    FILE_DROPPED = "file_dropped"
    FILES_HOVERED_LEFT = "files_hovered_left"


@dataclass(frozen=True)
class PhysicalPosition:
    """A position in physical pixels."""
    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """A size in logical pixels."""
    width: int
    height: int


class Event:
    """A window-related event."""
    kind: ClassVar[EventKind]


@dataclass(frozen=True)
class Opened(Event):
    """A window was opened."""
    kind: ClassVar[EventKind] = EventKind.OPENED
    position: Optional[PhysicalPosition]
    size: Size


@dataclass(frozen=True)
class Closed(Event):
    """A window was closed."""
    kind: ClassVar[EventKind] = EventKind.CLOSED


@dataclass(frozen=True)
class Moved(Event):
    """A window was moved to the logical location (x, y)."""
    kind: ClassVar[EventKind] = EventKind.MOVED
    x: int
    y: int


@dataclass(frozen=True)
class Resized(Event):
    """A window was resized to a new logical width and height."""
    kind: ClassVar[EventKind] = EventKind.RESIZED
    width: int
    height: int


@dataclass(frozen=True)
class RedrawRequested(Event):
    """A window redraw was requested. ``at`` is a monotonic timestamp in seconds."""
    kind: ClassVar[EventKind] = EventKind.REDRAW_REQUESTED
    at: float


@dataclass(frozen=True)
class CloseRequested(Event):
    """The user has requested for the window to close."""
    kind: ClassVar[EventKind] = EventKind.CLOSE_REQUESTED


@dataclass(frozen=True)
class Focused(Event):
    kind: ClassVar[EventKind] = EventKind.FOCUSED


@dataclass(frozen=True)
class Unfocused(Event):
    kind: ClassVar[EventKind] = EventKind.UNFOCUSED


@dataclass(frozen=True)
class FileHovered(Event):
    """
    A file is being hovered over the window.

    When several files are hovered at once, one event is emitted per file.
    """
    kind: ClassVar[EventKind] = EventKind.FILE_HOVERED
    position: PhysicalPosition


@dataclass(frozen=True)
class FileDropped(Event):
    """
    Files have been dropped into the window.

    ``paths`` is always stored as a tuple.
    """
    kind: ClassVar[EventKind] = EventKind.FILE_DROPPED
    paths: Tuple[Path, ...]
    position: PhysicalPosition

    def __post_init__(self) -> None:
        object.__setattr__(self, 'paths', tuple(self.paths))


@dataclass(frozen=True)
class FilesHoveredLeft(Event):
    """Hovered files have left the window. Emitted once for all files."""
    kind: ClassVar[EventKind] = EventKind.FILES_HOVERED_LEFT


EVENT_TYPES: Tuple[type[Event], ...] = (
    Opened,
    Closed,
    Moved,
    Resized,
    RedrawRequested,
    CloseRequested,
    Focused,
    Unfocused,
    FileHovered,
    FileDropped,
    FilesHoveredLeft,
)

event_kind_to_class = {cls.kind: cls for cls in EVENT_TYPES}

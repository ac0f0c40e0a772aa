from .event import (
    Event,
    EventKind,
    PhysicalPosition,
    Size,
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
    EVENT_TYPES,
    event_kind_to_class,
)

__all__ = [
    "Event",
    "EventKind",
    "PhysicalPosition",
    "Size",
    "Opened",
    "Closed",
    "Moved",
    "Resized",
    "RedrawRequested",
    "CloseRequested",
    "Focused",
    "Unfocused",
    "FileHovered",
    "FileDropped",
    "FilesHoveredLeft",
    "EVENT_TYPES",
    "event_kind_to_class",
]

"""Rich console handler for asset path events.

Where: platform/logging/handlers.py
What: Render records tagged with a ``path_event`` extra as compact, coloured path lines.
Why: Keep formatting concerns out of the domain code that emits the events.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class AssetPathRichHandler(RichHandler):
    """Rich handler that renders path events with coloured separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "path.absolute.resolved": ("🔗", "cyan", "Resolved "),
        "path.folder.assumed": ("📁", "yellow", "Assumed folder "),
        "path.folder.missing": ("⛔", "red", "Missing "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with coloured separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            if pure_path.is_relative_to(base_path):
                relative_path = pure_path.relative_to(base_path)
                if str(relative_path) not in {"", "."}:
                    display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator, "/"}
        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        """Render a structured path event, or ``None`` for plain records."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        base_path = getattr(record, "base_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path), base=base_path))
        if target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        path_text = self._render_path_event(record)
        if path_text is not None:
            return path_text
        return super().render_message(record, message)


__all__ = ["AssetPathRichHandler"]

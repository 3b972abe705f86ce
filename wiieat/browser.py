"""Directory listing and navigation for a simple file browser."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

MAXPATHLEN = 1024
MAXJOLIET = 255
MAXDISPLAY = 45

DEFAULT_ROOT = "sd:/"
PARENT_DISPLAY_NAME = "Up One Level"


@dataclass
class BrowserEntry:
    """One file or folder in the listing."""

    filename: str
    displayname: str = ""
    isdir: bool = False


def entry_sort_key(entry: BrowserEntry) -> tuple[int, int, str]:
    """Order ".", "..", then folders, then files, each case-insensitively."""
    if entry.filename == ".":
        special = 0
    elif entry.filename == "..":
        special = 1
    else:
        special = 2
    return (special, 0 if entry.isdir else 1, entry.filename.lower())


@dataclass
class Browser:
    """Current folder, its entries and the selection within them."""

    root: str = DEFAULT_ROOT
    dir: str = "/"
    entries: list[BrowserEntry] = field(default_factory=list)
    sel_index: int = 0
    page_index: int = 0

    @property
    def num_entries(self) -> int:
        return len(self.entries)

    def reset(self) -> None:
        """Forget the listing and the selection."""
        self.entries = []
        self.sel_index = 0
        self.page_index = 0

    def update_dir_name(self) -> bool:
        """Move into the selected entry; False if the folder stays the same.

        Raises ValueError if the new path would be too long.
        """
        selected = self.entries[self.sel_index].filename
        if selected == ".":
            return False
        if selected == "..":
            parts = [part for part in self.dir.split("/") if part]
            last = len(parts[-1]) if parts else 0
            self.dir = self.dir[: max(0, len(self.dir) - last - 1)]
            return True
        if len(self.dir) + 1 + len(selected) >= MAXPATHLEN:
            raise ValueError("path would be too long")
        self.dir = f"{self.dir}/{selected}"
        return True

    def _list(self, path: str) -> list[BrowserEntry]:
        entries = [BrowserEntry("..", PARENT_DISPLAY_NAME, True)]
        with os.scandir(path) as listing:
            for item in listing:
                if item.name in (".", ".."):
                    continue
                entries.append(
                    BrowserEntry(
                        filename=item.name[:MAXJOLIET],
                        displayname=item.name[:MAXDISPLAY],
                        isdir=item.is_dir(follow_symlinks=False),
                    )
                )
        return entries

    def parse_directory(self) -> int:
        """List the current folder, falling back to the root; return the count.

        Raises OSError if neither can be read.
        """
        self.reset()
        try:
            entries = self._list(f"{self.root}{self.dir}")
        except OSError:
            self.dir = "/"
            entries = self._list(self.root)
        entries.sort(key=entry_sort_key)
        self.entries = entries
        return self.num_entries

    def change_folder(self) -> int | None:
        """Enter the selected folder and list it; None if nothing changed."""
        try:
            if not self.update_dir_name():
                return None
        except ValueError:
            pass
        self.parse_directory()
        return self.num_entries

    def browse_device(self, root: str = DEFAULT_ROOT) -> int:
        """Start browsing at the top of a device; return the entry count."""
        self.dir = "/"
        self.root = root
        self.parse_directory()
        return self.num_entries
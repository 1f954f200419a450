"""Save pickers owned by the privileged side.

A picker returns the destination chosen for a file, or None when the user
dismissed it. The content view never chooses destination paths itself.
"""

from pathlib import Path
from typing import Protocol

DEFAULT_FILE_NAME = "download"


class SavePathPicker(Protocol):
    def ask_save_path(self, default_name: str) -> Path | None: ...


class DirectorySavePicker:
    """Saves into a fixed downloads directory, never clobbering an existing file.

    Without a configured directory every request counts as dismissed.
    """

    def __init__(self, directory: str | Path | None) -> None:
        self._directory = Path(directory) if directory is not None else None

    def ask_save_path(self, default_name: str) -> Path | None:
        if self._directory is None:
            return None

        self._directory.mkdir(parents=True, exist_ok=True)
        name = Path(default_name.replace("\\", "/")).name
        if name in ("", ".", ".."):
            name = DEFAULT_FILE_NAME

        candidate = self._directory / name
        stem, suffix = candidate.stem, candidate.suffix
        counter = 1
        while candidate.exists():
            candidate = self._directory / f"{stem} ({counter}){suffix}"
            counter += 1
        return candidate

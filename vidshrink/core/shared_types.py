from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class MediaFile:
    """
    A video on disk: the source handed to ffprobe and ffmpeg, or the output
    ffmpeg writes. The output may not exist yet, so existence is a query
    (`exists`) rather than a construction-time check.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() in ("", "."):
            raise ValueError("File path cannot be empty.")

    def exists(self) -> bool:
        return self.path.is_file()

    def ensure_parent_dir(self) -> None:
        """Creates the directory structure for this file if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

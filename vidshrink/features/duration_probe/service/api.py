from pathlib import Path
from vidshrink.core.shared_types import MediaFile
from ..data.ffprobe_adapter import FFprobeAdapter

def probe_duration(video_path: str) -> float:
    """
    Standalone API: Returns the duration of a video file in seconds.
    """
    return FFprobeAdapter().get_duration(MediaFile(Path(video_path)))

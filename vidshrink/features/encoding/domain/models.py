from dataclasses import dataclass
from pathlib import Path
from vidshrink.core.shared_types import MediaFile
from vidshrink.core.common.enums import TargetSize

@dataclass(frozen=True)
class EncodingRequest:
    """
    User intent: shrink `source_video` into `output_video` at `target_size`.
    Built once from the command line and never mutated.
    """
    source_video: MediaFile
    output_video: MediaFile
    target_size: TargetSize

    @classmethod
    def from_user_input(cls, input_path: str, output_path: str, size_mb: int) -> "EncodingRequest":
        # Size is checked first so a bad value never reaches ffprobe/ffmpeg
        target_size = TargetSize.from_megabytes(size_mb)
        return cls(
            source_video=MediaFile(Path(input_path)),
            output_video=MediaFile(Path(output_path)),
            target_size=target_size
        )

@dataclass(frozen=True)
class EncodeJob:
    source_video: MediaFile
    output_video: MediaFile
    video_bitrate: str  # ffmpeg suffix form, e.g. "8260k"

@dataclass(frozen=True)
class ShrinkReport:
    """
    What the pipeline decided and produced.
    """
    duration_seconds: float
    target_mb: int
    video_bitrate_bps: int
    video_bitrate_arg: str
    output_path: Path

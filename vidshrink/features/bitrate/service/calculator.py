import math
from vidshrink.core.config.settings import settings
from ..domain.models import BitrateParameters


def compute_video_bitrate(duration_seconds: float, target_bytes: int, audio_bitrate: int) -> int:
    """
    Computes the video bitrate (bits per second) so that

        (video_bitrate + audio_bitrate) * duration / 8 ~= target_bytes

    If the result falls below the floor (including negative results for very
    long inputs), the floor is returned instead. Durations so small that the
    division overflows saturate at the ceiling.

    Raises:
        ValueError: If duration is zero or negative.
    """
    if duration_seconds <= 0:
        raise ValueError(f"Duration must be positive, got {duration_seconds}")

    total_bitrate = target_bytes * 8 / duration_seconds
    video_bitrate = total_bitrate - audio_bitrate

    if video_bitrate < settings.MIN_VIDEO_BITRATE_BPS:
        return settings.MIN_VIDEO_BITRATE_BPS
    if math.isinf(video_bitrate):
        return settings.MAX_VIDEO_BITRATE_BPS
    return min(int(video_bitrate), settings.MAX_VIDEO_BITRATE_BPS)


def compute_for(params: BitrateParameters) -> int:
    return compute_video_bitrate(params.duration_seconds, params.target_bytes, params.audio_bitrate)


def format_bitrate_arg(bitrate_bps: int) -> str:
    """ffmpeg suffix form in kb/s, e.g. 8260608 -> "8260k"."""
    return f"{bitrate_bps // 1000}k"

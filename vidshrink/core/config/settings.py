# File: vidshrink/core/config/settings.py

import os
import shutil
import logging


def env_int(name: str, default: int) -> int:
    """Integer from the environment, or `default` when unset or not a number."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def env_log_level(name: str, default: str = "WARNING") -> str:
    """Log level name from the environment, or `default` when unknown to logging."""
    level = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


class Settings:
    # --- External Tools ---
    # Auto-detect ffmpeg/ffprobe or use env vars
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")
    FFPROBE_BINARY: str = os.getenv("FFPROBE_BINARY_PATH", shutil.which("ffprobe") or "ffprobe")

    # --- Encoding ---
    VIDEO_CODEC: str = os.getenv("VIDSHRINK_VIDEO_CODEC", "libx264")
    AUDIO_CODEC: str = "aac"
    AUDIO_BITRATE_BPS: int = 128_000

    # Below this the output is not worth watching, whatever the size target
    MIN_VIDEO_BITRATE_BPS: int = 100_000
    # Saturation point, the largest unsigned 64-bit value
    MAX_VIDEO_BITRATE_BPS: int = 2**64 - 1

    # --- Target Size (MB, see TargetSize for the allowed values) ---
    DEFAULT_SIZE_MB: int = env_int("VIDSHRINK_DEFAULT_SIZE_MB", 100)

    # --- Logging ---
    LOG_LEVEL: str = env_log_level("VIDSHRINK_LOG_LEVEL")

    @property
    def AUDIO_BITRATE_ARG(self) -> str:
        # ffmpeg suffix form, e.g. 128000 -> "128k"
        return f"{self.AUDIO_BITRATE_BPS // 1000}k"


settings = Settings()

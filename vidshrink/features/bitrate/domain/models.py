from dataclasses import dataclass
from vidshrink.core.config.settings import settings
from vidshrink.core.common.enums import TargetSize

@dataclass(frozen=True)
class BitrateParameters:
    """
    Inputs for the bitrate calculation.
    Duration comes from a successful probe, so it is always positive.
    """
    duration_seconds: float
    target_bytes: int
    audio_bitrate: int = settings.AUDIO_BITRATE_BPS

    def __post_init__(self):
        if self.duration_seconds <= 0:
            raise ValueError(f"Duration must be positive, got {self.duration_seconds}")
        if self.target_bytes < 0:
            raise ValueError(f"Target size cannot be negative: {self.target_bytes}")

    @classmethod
    def for_target(cls, duration_seconds: float, target: TargetSize) -> "BitrateParameters":
        return cls(duration_seconds=duration_seconds, target_bytes=target.to_bytes())

import math
import subprocess
import logging
from vidshrink.core.config.settings import settings
from vidshrink.core.common.errors import ProbeError
from vidshrink.core.shared_types import MediaFile
from ..domain.interfaces import IDurationProbe

logger = logging.getLogger(__name__)


def parse_duration(raw: str) -> float:
    """
    Parses ffprobe's bare duration output (e.g. "123.456\\n").
    Zero, negative and non-finite values are rejected.
    """
    text = raw.strip()
    try:
        duration = float(text)
    except ValueError as e:
        raise ProbeError(f"ffprobe returned a non-numeric duration: {text!r}") from e

    if not math.isfinite(duration) or duration <= 0:
        raise ProbeError(f"ffprobe returned an unusable duration: {text!r}")
    return duration


class FFprobeAdapter(IDurationProbe):
    """
    Concrete implementation of IDurationProbe using ffprobe.
    Reads the container duration of the first video stream.
    """

    def get_duration(self, media: MediaFile) -> float:
        if not media.exists():
            raise ProbeError(f"Input file not found: {media.path}")

        # -v error: Only print real errors to stderr
        # -select_streams v:0: First video stream
        # -of default=noprint_wrappers=1:nokey=1: Bare value, no "duration=" key
        cmd = [
            settings.FFPROBE_BINARY,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            str(media.path)
        ]

        logger.info(f"Probing duration: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True
            )
        except FileNotFoundError as e:
            logger.error(f"ffprobe binary not found: {settings.FFPROBE_BINARY}")
            raise ProbeError(f"ffprobe not found: {settings.FFPROBE_BINARY}") from e
        except subprocess.CalledProcessError as e:
            error_message = e.stderr.strip() if e.stderr else "Unknown ffprobe error"
            logger.error(f"ffprobe failed. STDERR: {error_message}")
            raise ProbeError(f"ffprobe failed: {error_message}") from e

        duration = parse_duration(result.stdout)
        logger.debug(f"Duration of {media.path}: {duration}s")
        return duration

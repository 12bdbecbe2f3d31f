import subprocess
import logging
from vidshrink.core.config.settings import settings
from vidshrink.core.common.errors import EncodeError
from ..domain.interfaces import IEncoder
from ..domain.models import EncodeJob

logger = logging.getLogger(__name__)

class FFmpegEncodeAdapter(IEncoder):
    """
    Concrete implementation of IEncoder using FFmpeg.
    Video is re-encoded at a fixed average bitrate, audio at a fixed 128k.
    """

    def encode(self, job: EncodeJob) -> None:
        # 1. Ensure the directory for the output file exists
        job.output_video.ensure_parent_dir()

        # 2. Construct the FFmpeg Command
        # -y: Overwrite output files without asking
        # -b:v: Average video bitrate that hits the size target
        # -b:a: Audio allowance already subtracted from the total budget
        cmd = [
            settings.FFMPEG_BINARY,
            "-y",
            "-i", str(job.source_video.path),
            "-c:v", settings.VIDEO_CODEC,
            "-b:v", job.video_bitrate,
            "-c:a", settings.AUDIO_CODEC,
            "-b:a", settings.AUDIO_BITRATE_ARG,
            str(job.output_video.path)
        ]

        logger.info(f"Executing FFmpeg Encode: {' '.join(cmd)}")

        try:
            # 3. Execute
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True
            )
        except FileNotFoundError as e:
            logger.error(f"FFmpeg binary not found: {settings.FFMPEG_BINARY}")
            raise EncodeError(f"ffmpeg not found: {settings.FFMPEG_BINARY}") from e
        except subprocess.CalledProcessError as e:
            error_message = e.stderr if e.stderr else "Unknown FFmpeg error"
            logger.error(f"FFmpeg Encoding Failed. STDERR: {error_message}")
            raise EncodeError(f"ffmpeg failed during encoding: {error_message}") from e

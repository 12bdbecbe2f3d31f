import logging
from typing import Optional
from vidshrink.core.config.settings import settings
from vidshrink.features.duration_probe.domain.interfaces import IDurationProbe
from vidshrink.features.duration_probe.data.ffprobe_adapter import FFprobeAdapter
from vidshrink.features.bitrate.domain.models import BitrateParameters
from vidshrink.features.bitrate.service.calculator import compute_for, format_bitrate_arg
from ..domain.interfaces import IEncoder
from ..domain.models import EncodingRequest, EncodeJob, ShrinkReport
from ..data.ffmpeg_adapter import FFmpegEncodeAdapter

logger = logging.getLogger(__name__)

def plan_shrink(request: EncodingRequest, probe: Optional[IDurationProbe] = None) -> ShrinkReport:
    """
    Decides the video bitrate without touching the output file.

    1. Obtains the duration via the probe.
    2. Computes the video bitrate, leaving room for 128 kb/s of audio.
    """
    probe = probe or FFprobeAdapter()

    # 1. Probe
    duration = probe.get_duration(request.source_video)

    # 2. Calculate
    params = BitrateParameters.for_target(duration, request.target_size)
    video_bitrate = compute_for(params)
    bitrate_arg = format_bitrate_arg(video_bitrate)

    logger.info(
        f"{request.source_video.path}: {duration:.2f}s -> {request.target_size.megabytes} MB "
        f"at {bitrate_arg} ({video_bitrate} bps)"
    )

    return ShrinkReport(
        duration_seconds=duration,
        target_mb=request.target_size.megabytes,
        video_bitrate_bps=video_bitrate,
        video_bitrate_arg=bitrate_arg,
        output_path=request.output_video.path
    )

def encode_planned(request: EncodingRequest, report: ShrinkReport, encoder: Optional[IEncoder] = None) -> None:
    """
    Runs the encoder with the bitrate chosen by plan_shrink.
    """
    encoder = encoder or FFmpegEncodeAdapter()
    encoder.encode(EncodeJob(
        source_video=request.source_video,
        output_video=request.output_video,
        video_bitrate=report.video_bitrate_arg
    ))

def shrink(
    request: EncodingRequest,
    probe: Optional[IDurationProbe] = None,
    encoder: Optional[IEncoder] = None
) -> ShrinkReport:
    """
    Re-encodes the source so the output lands near the target size.
    """
    report = plan_shrink(request, probe=probe)
    encode_planned(request, report, encoder=encoder)
    return report

def reduce_video(
    input_path: str,
    output_path: str,
    target_mb: int = settings.DEFAULT_SIZE_MB,
    probe: Optional[IDurationProbe] = None,
    encoder: Optional[IEncoder] = None
) -> ShrinkReport:
    """
    Public Service API: Shrink a video file to roughly `target_mb` megabytes.

    Raises:
        InvalidSizeArgument: If target_mb is not an allowed size. Nothing is executed.
        ProbeError: If the duration cannot be determined.
        EncodeError: If ffmpeg fails.
    """
    request = EncodingRequest.from_user_input(input_path, output_path, target_mb)
    return shrink(request, probe=probe, encoder=encoder)

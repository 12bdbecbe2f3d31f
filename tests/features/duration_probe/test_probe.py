import subprocess
import pytest

from vidshrink.core.config.settings import settings
from vidshrink.core.common.errors import ProbeError
from vidshrink.core.shared_types import MediaFile
from vidshrink.features.duration_probe.data.ffprobe_adapter import FFprobeAdapter, parse_duration
from vidshrink.features.duration_probe.service.api import probe_duration


def test_parse_duration():
    assert abs(parse_duration("123.456\n") - 123.456) < 0.001


@pytest.mark.parametrize("raw", ["", "N/A\n", "duration=12.0", "abc"])
def test_parse_duration_rejects_non_numeric(raw):
    with pytest.raises(ProbeError):
        parse_duration(raw)


@pytest.mark.parametrize("raw", ["0", "0.000000\n", "-3.5", "nan", "inf"])
def test_parse_duration_rejects_unusable_values(raw):
    with pytest.raises(ProbeError):
        parse_duration(raw)


def test_probe_builds_ffprobe_command(fake_run, source_video):
    fake_run.queue(stdout="42.500000\n")

    duration = FFprobeAdapter().get_duration(MediaFile(source_video))

    assert duration == pytest.approx(42.5)
    assert fake_run.calls == [[
        settings.FFPROBE_BINARY,
        "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        str(source_video),
    ]]


def test_probe_failure_includes_stderr(fake_run, source_video):
    fake_run.queue(stderr="moov atom not found", returncode=1)

    with pytest.raises(ProbeError, match="moov atom not found") as exc_info:
        probe_duration(str(source_video))

    assert isinstance(exc_info.value.__cause__, subprocess.CalledProcessError)


def test_probe_zero_duration_is_probe_error(fake_run, source_video):
    fake_run.queue(stdout="0.000000\n")

    with pytest.raises(ProbeError):
        probe_duration(str(source_video))


def test_probe_missing_binary(fake_run, source_video):
    fake_run.queue(exc=FileNotFoundError("ffprobe"))

    with pytest.raises(ProbeError, match="not found"):
        probe_duration(str(source_video))


def test_probe_missing_input_runs_nothing(fake_run, tmp_path):
    with pytest.raises(ProbeError, match="Input file not found"):
        probe_duration(str(tmp_path / "missing.mp4"))

    assert fake_run.calls == []

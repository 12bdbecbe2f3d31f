import shutil
import subprocess
import pytest

from vidshrink.cli import main
from vidshrink.features.duration_probe.service.api import probe_duration

pytestmark = pytest.mark.skipif(
    not (shutil.which("ffmpeg") and shutil.which("ffprobe")),
    reason="ffmpeg/ffprobe not installed"
)


@pytest.fixture
def synthetic_video(tmp_path):
    """
    Generates a 3-second video with a sine wave audio track.
    """
    video_path = tmp_path / "synthetic.mp4"
    cmd = [
        "ffmpeg", "-y",
        "-f", "lavfi", "-i", "testsrc=duration=3:size=320x240:rate=30",
        "-f", "lavfi", "-i", "sine=frequency=1000:duration=3",
        "-c:v", "libx264", "-c:a", "aac",
        "-pix_fmt", "yuv420p",
        str(video_path)
    ]
    subprocess.run(cmd, check=True, capture_output=True)
    return video_path


def test_full_shrink_pipeline(synthetic_video, tmp_path, capsys):
    output = tmp_path / "shrunk" / "synthetic_50.mp4"

    exit_code = main([str(synthetic_video), str(output), "--size", "50"])

    assert exit_code == 0
    assert output.exists()
    assert output.stat().st_size < 50 * 1024 * 1024
    assert "Target size: 50 MB" in capsys.readouterr().out

    # Output keeps the source duration (allow codec overhead)
    assert abs(probe_duration(str(output)) - 3.0) < 0.2


def test_corrupt_input_is_probe_failure(tmp_path, capsys):
    bogus = tmp_path / "not_a_video.mp4"
    bogus.write_text("definitely not an mp4")

    exit_code = main([str(bogus), str(tmp_path / "out.mp4")])

    assert exit_code == 1
    assert "ffprobe" in capsys.readouterr().err
    assert not (tmp_path / "out.mp4").exists()

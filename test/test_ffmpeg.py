import json
import subprocess
import pytest
from pathlib import Path

from record_screen import config
from record_screen.data.result import VideoMetadata
from record_screen.errors import FFMpegError
from record_screen.ffmpeg import FFMpegRecorder


class FakeRun:
    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[list[str]] = []

    def __call__(self, cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        self.calls.append(cmd)
        # a stream copy writes the last argument
        if self.returncode == 0 and "-codec" in cmd:
            Path(cmd[-1]).write_text("rotated")
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


class TestFFMpegRecorder():
    def test_tmp_path(self) -> None:
        assert FFMpegRecorder.tmp_path(Path("/tmp/test.mp4")) == Path("/tmp/test.tmp.mp4")
        assert FFMpegRecorder.tmp_path(Path("/tmp/a.b.mkv")) == Path("/tmp/a.b.tmp.mkv")
        assert FFMpegRecorder.tmp_path(Path("/tmp/video")) == Path("/tmp/tmp.video")

    def test_set_rotation_metadata(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        video = tmp_path.joinpath("test.mp4")
        video.write_text("recorded")
        fake_run = FakeRun()
        monkeypatch.setattr(subprocess, "run", fake_run)

        FFMpegRecorder.set_rotation_metadata(video, 90)

        assert fake_run.calls == [[config.ffmpeg, "-y", "-loglevel", "error", "-i", str(video), "-codec", "copy",
                                   "-map_metadata", "0", "-metadata:s:v", "rotate=90",
                                   str(tmp_path.joinpath("test.tmp.mp4"))]]
        assert video.read_text() == "rotated"
        assert not tmp_path.joinpath("test.tmp.mp4").exists()

    def test_set_rotation_metadata_failure_keeps_original(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        video = tmp_path.joinpath("test.mp4")
        video.write_text("recorded")
        monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr="test.mp4: Invalid data found"))

        with pytest.raises(FFMpegError) as exc_info:
            FFMpegRecorder.set_rotation_metadata(video, 90)

        assert exc_info.value.returncode == 1
        assert "Invalid data found" in str(exc_info.value)
        assert video.read_text() == "recorded"

    def test_check_video_integrity(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_run = FakeRun()
        monkeypatch.setattr(subprocess, "run", fake_run)
        FFMpegRecorder.check_video_integrity("/tmp/test.mp4")
        assert fake_run.calls == [[config.ffmpeg, "-v", "error", "-i", "/tmp/test.mp4", "-f", "null", "-"]]

        monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr="moov atom not found"))
        with pytest.raises(FFMpegError):
            FFMpegRecorder.check_video_integrity("/tmp/test.mp4")

    def test_get_video_metadata(self, monkeypatch: pytest.MonkeyPatch) -> None:
        output = {"streams": [{"width": 1440, "height": 900, "tags": {"rotate": "270"}}], "format": {"duration": "2.0"}}
        fake_run = FakeRun(stdout=json.dumps(output))
        monkeypatch.setattr(subprocess, "run", fake_run)

        assert FFMpegRecorder.get_video_metadata("-") == VideoMetadata(duration=2.0, width=1440, height=900, rotate=270)
        assert fake_run.calls[0][0] == config.ffprobe

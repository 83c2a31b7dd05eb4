import json
import logging
import subprocess
from pathlib import Path
from typing import Union

from record_screen import config
from record_screen.data.result import VideoMetadata
from record_screen.errors import FFMpegError


class FFMpegRecorder:
    """
    Utility class to wrap around the short, blocking ffmpeg and ffprobe calls.
    """

    @staticmethod
    def run(cmd: list[str]) -> subprocess.CompletedProcess:
        logging.debug("running %s", " ".join(cmd))
        res = subprocess.run(cmd, capture_output=True, text=True)
        if res.returncode != 0:
            raise FFMpegError(res.returncode, cmd, res.stdout, res.stderr)
        return res

    @staticmethod
    def tmp_path(video_path: Path) -> Path:
        # out.mp4 -> out.tmp.mp4
        if video_path.suffix:
            return video_path.with_name(f"{video_path.stem}.tmp{video_path.suffix}")
        return video_path.with_name(f"tmp.{video_path.name}")

    @staticmethod
    def set_rotation_metadata(video_path: Union[str, Path], rotate: int) -> None:
        # The mp4 muxer cannot set this metadata while encoding (https://trac.ffmpeg.org/ticket/6370),
        # so the finished file is stream copied with the tag into a temporary file which then replaces it.
        video_path = Path(video_path)
        tmp_path = FFMpegRecorder.tmp_path(video_path)
        logging.info("setting rotate=%s on %s", rotate, video_path)
        FFMpegRecorder.run([config.ffmpeg, "-y", "-loglevel", "error", "-i", str(video_path), "-codec", "copy",
                            "-map_metadata", "0", "-metadata:s:v", f"rotate={rotate}", str(tmp_path)])
        video_path.unlink()
        tmp_path.rename(video_path)

    @staticmethod
    def check_video_integrity(video_path: Union[str, Path]) -> None:
        FFMpegRecorder.run([config.ffmpeg, "-v", "error", "-i", str(video_path), "-f", "null", "-"])

    @staticmethod
    def get_video_metadata(video_path: Union[str, Path]) -> VideoMetadata:
        res = FFMpegRecorder.run([config.ffprobe, "-v", "error", "-show_entries",
                                  "format=duration:stream=width,height:stream_tags=rotate", "-of", "json", str(video_path)])
        return VideoMetadata.from_ffprobe(**json.loads(res.stdout))

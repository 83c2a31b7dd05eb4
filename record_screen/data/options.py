from dataclasses import dataclass, field
from typing import Optional

from record_screen.data.data import Data

X11GRAB = "x11grab"


@dataclass
class RecordingOptions(Data):
    """
    Screen recording options.

    Defaults apply only when a field is not passed at all. Passing None (or an
    empty value) for a defaulted field leaves the matching ffmpeg flag out.
    """

    aliases = {
        "inputFormat": "input_format",
        "videoFilter": "video_filter",
        "videoCodec": "video_codec",
        "pixelFormat": "pixel_format",
    }

    loglevel: Optional[str] = field(default=None)
    input_format: Optional[str] = field(default=X11GRAB)
    # must match the X11 display resolution when using x11grab
    resolution: Optional[str] = field(default=None)
    fps: Optional[int] = field(default=15)
    video_filter: Optional[str] = field(default=None)
    video_codec: Optional[str] = field(default=None)
    # yuv420p for QuickTime compatibility
    pixel_format: Optional[str] = field(default="yuv420p")
    # rotate metadata, 90 rotates left by 90 degrees
    rotate: Optional[int] = field(default=None)

    # x11grab input
    hostname: Optional[str] = field(default=None)
    display: Optional[str] = field(default="0")

    # network stream input
    protocol: Optional[str] = field(default="http")
    username: Optional[str] = field(default=None)
    password: Optional[str] = field(default=None)
    port: Optional[int] = field(default=9000)
    pathname: Optional[str] = field(default=None)
    search: Optional[str] = field(default=None)

    @property
    def is_device_grab(self) -> bool:
        return self.input_format == X11GRAB

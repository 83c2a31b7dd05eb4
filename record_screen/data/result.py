from dataclasses import dataclass, field
from typing import Any, Optional, Self

from record_screen.data.data import Data


@dataclass
class Result(Data):
    stdout: str = field(default="")
    stderr: str = field(default="")


@dataclass
class VideoMetadata(Data):
    duration: float = field(default=0.0)
    width: int = field(default=0)
    height: int = field(default=0)
    rotate: Optional[int] = field(default=None)

    @property
    def resolution(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def from_ffprobe(cls, **kwargs) -> Self:
        """
        Builds metadata from ffprobe's json output for
        -show_entries format=duration:stream=width,height:stream_tags=rotate.
        """
        new_kwargs: dict[str, Any] = {}
        if "format" in kwargs and "duration" in kwargs["format"]:
            new_kwargs["duration"] = float(kwargs["format"]["duration"])
        streams = kwargs.get("streams") or [{}]
        stream = streams[0]
        for k in ("width", "height"):
            if k in stream:
                new_kwargs[k] = int(stream[k])
        rotate = stream.get("tags", {}).get("rotate")
        if rotate is not None:
            new_kwargs["rotate"] = int(rotate)
        return cls(**new_kwargs)

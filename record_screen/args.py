from pathlib import Path
from typing import Union
from urllib.parse import quote

from record_screen import config
from record_screen.data.options import RecordingOptions

# characters left as-is in each url component, everything else is percent-encoded
USERINFO_SAFE = "!$&'()*+,;=%"
PATH_SAFE = "/:@!$&'()*+,;=%"
QUERY_SAFE = "/?:@!$&'()*+,;=%"


def build_url(options: RecordingOptions) -> str:
    """
    Builds the input url for network stream formats (e.g. mjpeg) from the url properties of the options.
    """
    scheme = (options.protocol or "http").rstrip(":").lower()

    netloc = ""
    if options.username:
        netloc += quote(options.username, safe=USERINFO_SAFE)
        if options.password:
            netloc += ":" + quote(options.password, safe=USERINFO_SAFE)
        netloc += "@"

    host = options.hostname or "localhost"
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    netloc += host

    if options.port and str(options.port) != str(config.default_ports.get(scheme)):
        netloc += f":{options.port}"

    path = options.pathname or "/"
    if not path.startswith("/"):
        path = f"/{path}"

    url = f"{scheme}://{netloc}{quote(path, safe=PATH_SAFE)}"

    query = (options.search or "").removeprefix("?")
    if query:
        url += f"?{quote(query, safe=QUERY_SAFE)}"
    return url


def build_input(options: RecordingOptions) -> str:
    if options.is_device_grab:
        return f"{options.hostname or ''}:{options.display or ''}"
    return build_url(options)


def build_ffmpeg_args(file_name: Union[str, Path], options: RecordingOptions) -> list[str]:
    """
    Builds the ffmpeg arguments for a screen recording. ffmpeg options apply to the
    next input or output file, so the order below matters.
    """
    args = ["-y"]  # overwrite existing files
    if options.loglevel:
        args += ["-loglevel", options.loglevel]
    if options.resolution:
        args += ["-video_size", options.resolution]
    if options.fps:
        # frames per second to record from input
        args += ["-r", str(options.fps)]
    if options.input_format:
        args += ["-f", options.input_format]
    args += ["-i", build_input(options)]
    if options.video_filter:
        args += ["-vf", options.video_filter]
    if options.video_codec:
        args += ["-vcodec", options.video_codec]
    if options.pixel_format:
        args += ["-pix_fmt", options.pixel_format]
    args.append(str(file_name))
    return args

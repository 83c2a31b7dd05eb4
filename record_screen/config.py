import os

# executables
ffmpeg = os.environ.get("FFMPEG", "ffmpeg")
ffprobe = os.environ.get("FFPROBE", "ffprobe")

# ffmpeg exits with this status after handling SIGINT
sigint_exit_code = 255

# opt-in allowance for a single known-harmless line on stderr, e.g.
# r"\[x11grab @ 0x[0-9a-f]+\] .*"; matches version-specific text, keep unset unless needed
benign_stderr_pattern = os.environ.get("RECORD_SCREEN_BENIGN_STDERR") or None

# well-known ports omitted from stream urls
default_ports = {
    "ftp": 21,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}

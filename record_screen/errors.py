import subprocess


class FFMpegError(subprocess.CalledProcessError):
    """
    Raised when an ffmpeg or ffprobe invocation exits with a failure status.
    Carries the command, the returncode and the captured output.
    """

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            stderr = self.stderr if isinstance(self.stderr, str) else self.stderr.decode(errors="replace")
            message += f"\n{stderr.strip()}"
        return message

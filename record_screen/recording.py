import asyncio
import contextlib
import logging
import signal
import subprocess
from pathlib import Path
from typing import Optional, Union

from record_screen import config
from record_screen.args import build_ffmpeg_args
from record_screen.data.options import RecordingOptions
from record_screen.data.result import Result
from record_screen.errors import FFMpegError
from record_screen.ffmpeg import FFMpegRecorder
from record_screen.outcome import Outcome, classify_exit


class Recording:
    """
    Handle for a single screen recording.

    completion resolves with the captured ffmpeg output once the process exits, including
    after cancel(). It raises FFMpegError for any other failure and the spawn OSError
    when ffmpeg cannot be started.
    """

    def __init__(self, file_name: Union[str, Path], options: RecordingOptions) -> None:
        self.file_name = Path(file_name)
        self.options = options
        self.cmd = [config.ffmpeg, *build_ffmpeg_args(self.file_name, options)]

        # state
        self._process: Optional[asyncio.subprocess.Process] = None
        self._interrupted = False

        self.completion: asyncio.Task[Result] = asyncio.create_task(self._run())

    def is_running(self) -> bool:
        return self._process is not None and self._process.returncode is None

    def cancel(self) -> None:
        """
        Stops the recording by sending SIGINT to ffmpeg. Does nothing if ffmpeg has not
        started yet, has already exited, or was already interrupted.
        """
        if self._process is None or self._process.returncode is not None or self._interrupted:
            return
        logging.info("stopping recording of %s", self.file_name)
        self._interrupted = True
        try:
            self._process.send_signal(signal.SIGINT)
        except ProcessLookupError:
            logging.debug("ffmpeg exited before it could be interrupted")

    async def _run(self) -> Result:
        result = await self._record()
        if self.options.rotate:
            await asyncio.to_thread(FFMpegRecorder.set_rotation_metadata, self.file_name, self.options.rotate)
        return result

    async def _record(self) -> Result:
        logging.info("recording screen to %s", self.file_name)
        logging.debug("ffmpeg command: %s", " ".join(self.cmd))

        self._process = await asyncio.create_subprocess_exec(
            *self.cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        try:
            out, err = await self._process.communicate()
        except asyncio.CancelledError:
            with contextlib.suppress(ProcessLookupError):
                self._process.kill()
            await asyncio.shield(self._process.wait())
            raise
        finally:
            returncode = self._process.returncode
            self._process = None

        stdout = out.decode(errors="replace")
        stderr = err.decode(errors="replace")
        outcome = classify_exit(returncode, self._interrupted, stderr, config.benign_stderr_pattern)
        match outcome:
            case Outcome.FAILED:
                logging.error("recording of %s failed with status %s", self.file_name, returncode)
                raise FFMpegError(returncode, self.cmd, stdout, stderr)
            case Outcome.CANCELLED:
                logging.info("recording of %s stopped", self.file_name)
            case _:
                logging.info("recording of %s finished", self.file_name)
        return Result(stdout=stdout, stderr=stderr)


def record_screen(file_name: Union[str, Path], options: Optional[RecordingOptions] = None) -> Recording:
    """
    Starts a screen recording via ffmpeg, by default using x11grab.
    Must be called from a running event loop.
    """
    return Recording(file_name, options if options is not None else RecordingOptions())

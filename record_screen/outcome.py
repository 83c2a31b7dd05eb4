import enum
import re
from typing import Optional, Union

from record_screen import config


class Outcome(enum.Enum):
    SUCCESS = "SUCCESS"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


def classify_exit(
    returncode: int, interrupted: bool, stderr: str, benign_pattern: Optional[Union[str, re.Pattern]] = None
) -> Outcome:
    """
    Decides how a finished ffmpeg run is reported.

    A recording stopped with SIGINT is not an error as long as ffmpeg exited with its own
    SIGINT status. If benign_pattern is given, a run whose stderr is exactly one line
    matching it also counts as a success. That allowance depends on the wording of a
    specific ffmpeg version, so it is only used when configured.
    """
    if returncode == 0:
        return Outcome.SUCCESS
    if interrupted and returncode == config.sigint_exit_code:
        return Outcome.CANCELLED
    if benign_pattern is not None:
        lines = stderr.strip().splitlines()
        if len(lines) == 1 and re.fullmatch(benign_pattern, lines[0].strip()):
            return Outcome.SUCCESS
    return Outcome.FAILED

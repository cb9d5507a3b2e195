"""
Helper utility functions
"""

import logging
import re
import shutil
from datetime import timedelta
from typing import Callable, Optional, Union

from ..batch import BatchSystem
from ..exceptions import ConfigurationError

log = logging.getLogger(__name__)

# Submission tools probed during autodetection, in probe order
PBS_SUBMIT_TOOL = "qsub"
SLURM_SUBMIT_TOOL = "sbatch"

_CLOCK_RE = re.compile(r'^(?:(\d+):)?(\d+):(\d+(?:\.\d+)?)$')
_DURATION_RE = re.compile(r'(\d+(?:\.\d+)?)(ms|h|m|s)')
_DURATION_UNITS = {
    'h': 3600.0,
    'm': 60.0,
    's': 1.0,
    'ms': 0.001,
}


def format_walltime(duration: Union[timedelta, int, float]) -> str:
    """
    Format a duration as HH:MM:SS for scheduler directives.

    The duration is rounded to the nearest whole second (halves round up).
    Hours are not wrapped, so 90000 seconds gives "25:00:00".

    Args:
        duration: timedelta or number of seconds, must not be negative

    Returns:
        Zero padded "HH:MM:SS" string
    """
    if not isinstance(duration, timedelta):
        duration = timedelta(seconds=duration)

    micro = duration // timedelta(microseconds=1)
    seconds, remainder = divmod(micro, 1_000_000)
    if remainder >= 500_000:
        seconds += 1

    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _seconds(seconds, value) -> timedelta:
    """timedelta from seconds, rejecting values timedelta cannot hold"""
    try:
        return timedelta(seconds=seconds)
    except (OverflowError, ValueError) as e:
        raise ConfigurationError(f"Invalid walltime: {value!r}") from e


def parse_walltime(value) -> timedelta:
    """
    Parse a walltime value from a job description.

    Accepts a timedelta, a number of seconds, a clock string ("HH:MM:SS"
    or "MM:SS") or a duration string such as "1h30m", "90m" or "1.5h".
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid walltime: {value!r}")
    if isinstance(value, (int, float)):
        return _seconds(value, value)
    if not isinstance(value, str):
        raise ConfigurationError(f"Invalid walltime: {value!r}")

    text = value.strip()

    match = _CLOCK_RE.match(text)
    if match:
        hours, minutes, seconds = match.groups()
        return _seconds(int(hours or 0) * 3600 + int(minutes) * 60 + float(seconds), value)

    # Go style durations: 1h30m, 45s, 1.5h
    if text and _DURATION_RE.sub('', text) == '':
        total = sum(float(number) * _DURATION_UNITS[unit]
                    for number, unit in _DURATION_RE.findall(text))
        return _seconds(total, value)

    raise ConfigurationError(f"Invalid walltime: {value!r}")


def detect_scheduler(which: Optional[Callable[[str], Optional[str]]] = None,
                     bare_fallback: bool = True) -> BatchSystem:
    """
    Auto-detect available scheduler

    Probes for the PBS submission tool first, then the SLURM one.

    Returns:
        BatchSystem.PBS, BatchSystem.SLURM, or BARE / UNSUPPORTED when
        neither tool is on the search path
    """
    which = which or shutil.which

    if which(PBS_SUBMIT_TOOL):
        log.debug("Found %s, using PBS", PBS_SUBMIT_TOOL)
        return BatchSystem.PBS
    elif which(SLURM_SUBMIT_TOOL):
        log.debug("Found %s, using SLURM", SLURM_SUBMIT_TOOL)
        return BatchSystem.SLURM

    if bare_fallback:
        log.debug("No scheduler found, falling back to a bare script")
        return BatchSystem.BARE
    log.debug("No scheduler found and bare fallback is disabled")
    return BatchSystem.UNSUPPORTED


def resolve_batch_system(requested: Union[str, BatchSystem],
                         which: Optional[Callable[[str], Optional[str]]] = None,
                         bare_fallback: bool = True) -> BatchSystem:
    """Resolve a requested batch system, probing the host only for autodetect"""
    kind = BatchSystem.parse(requested)
    if kind is BatchSystem.AUTODETECT:
        return detect_scheduler(which, bare_fallback)
    return kind

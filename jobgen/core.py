# jobgen/core.py
"""
Jobgen - batch script generation

Main interface: turns a job description into a submission script for
PBS, SLURM or a plain shell.
"""

import logging
import shutil
from typing import Callable, Optional, Union

from .batch import BatchSystem
from .command import build_body
from .config import EngineOptions
from .derived import derive_fields
from .exceptions import ConfigurationError, UnsupportedBatchSystemError
from .job import JobSpec
from .scheduler import BaseScheduler, get_scheduler
from .utils.helpers import PBS_SUBMIT_TOOL, SLURM_SUBMIT_TOOL, resolve_batch_system

log = logging.getLogger(__name__)


class JobScriptGenerator:
    """
    Main interface for script generation.

    Usage:
        spec, options = load_job_file("job.yaml")

        generator = JobScriptGenerator(options)
        script = generator.generate(spec, "slurm")
    """

    def __init__(self, options: Optional[EngineOptions] = None,
                 which: Optional[Callable[[str], Optional[str]]] = None):
        """
        Initialize JobScriptGenerator.

        Args:
            options: Engine options, defaults used when omitted
            which: Search path probe used for autodetection
                (defaults to shutil.which)
        """
        self.options = options or EngineOptions()
        self.which = which or shutil.which

    def resolve(self, batch_system: Union[str, BatchSystem]) -> BatchSystem:
        """
        Resolve the requested batch system.

        Explicit requests are returned as given; only 'autodetect' probes
        the host.

        Raises:
            UnsupportedBatchSystemError: the request, or what autodetection
                found, has no script strategy
        """
        kind = resolve_batch_system(batch_system, self.which, self.options.bare_fallback)

        if not kind.is_concrete:
            requested = batch_system.value if isinstance(batch_system, BatchSystem) else str(batch_system)
            if BatchSystem.parse(batch_system) is BatchSystem.AUTODETECT:
                raise UnsupportedBatchSystemError(
                    requested, f"no supported batch system detected (looked for {PBS_SUBMIT_TOOL}, {SLURM_SUBMIT_TOOL})")
            raise UnsupportedBatchSystemError(requested)

        log.debug("Resolved batch system %s -> %s", batch_system, kind.value)
        return kind

    def scheduler(self, batch_system: Union[str, BatchSystem]) -> BaseScheduler:
        """Get the header renderer for a requested batch system"""
        return get_scheduler(self.resolve(batch_system), self.options)

    def generate(self, spec: JobSpec,
                 batch_system: Union[str, BatchSystem] = BatchSystem.AUTODETECT) -> str:
        """
        Generate batch script content.

        Args:
            spec: Job description
            batch_system: 'pbs', 'slurm', 'bare' or 'autodetect'

        Returns:
            Complete script text
        """
        scheduler = self.scheduler(batch_system)

        if not spec.executable:
            raise ConfigurationError(f"Job {spec.name} has no executable")

        derived = derive_fields(spec, self.options)

        header = scheduler.build_header(spec, derived)
        body = build_body(spec, derived, self.options, scheduler.uses_launcher)

        log.debug("Generated %s script for job %s", scheduler.kind.value, spec.name)
        return header + body


# Convenience function
def generate_script(spec: JobSpec,
                    batch_system: Union[str, BatchSystem] = BatchSystem.AUTODETECT,
                    options: Optional[EngineOptions] = None,
                    which: Optional[Callable[[str], Optional[str]]] = None) -> str:
    """
    Generate a batch script for a job.

    Args:
        spec: Job description
        batch_system: 'pbs', 'slurm', 'bare' or 'autodetect'
        options: Engine options
        which: Search path probe used for autodetection

    Returns:
        Script text
    """
    return JobScriptGenerator(options=options, which=which).generate(spec, batch_system)

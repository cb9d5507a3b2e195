# jobgen/__init__.py
"""
Jobgen - batch script generation for HPC jobs

One job description, the right submission script for PBS, SLURM or a
plain shell.

Usage:
    from jobgen import load_job_file, generate_script

    spec, options = load_job_file('job.yaml')

    # Detect the scheduler installed on this host
    script = generate_script(spec, 'autodetect', options)

    # Or ask for one explicitly
    script = generate_script(spec, 'pbs', options)
"""

from .batch import BatchSystem
from .core import JobScriptGenerator, generate_script
from .job import JobSpec
from .config import EngineOptions, load_job_file, parse_job_data, save_default_job
from .derived import DerivedFields, derive_fields
from .exceptions import (
    JobgenError,
    ConfigurationError,
    UnsupportedBatchSystemError,
    TemplateSubstitutionError,
)
from .utils import format_walltime, detect_scheduler

__version__ = "1.0.0"
__all__ = [
    'JobScriptGenerator',
    'generate_script',
    'BatchSystem',
    'JobSpec',
    'EngineOptions',
    'load_job_file',
    'parse_job_data',
    'save_default_job',
    'DerivedFields',
    'derive_fields',
    'format_walltime',
    'detect_scheduler',
    # Errors
    'JobgenError',
    'ConfigurationError',
    'UnsupportedBatchSystemError',
    'TemplateSubstitutionError',
]

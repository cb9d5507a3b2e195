# jobgen/config.py
"""
Job file loading and engine options.
Handles the differences between script variants: launcher flags, log layout, mail, etc.
"""

import os
import yaml
from dataclasses import dataclass, fields
from typing import Dict, Any, Tuple

from .exceptions import ConfigurationError
from .job import JobSpec

OMP_FLAG_SETS = ('openmpi', 'minimal')
LOG_LAYOUTS = ('flat', 'nested')

DEFAULT_JOB_HEADER = """\
# jobgen job file
#
# walltime: seconds, "HH:MM:SS" or a duration such as "1h30m"
# arguments, runtime_prefix and directives may reference derived values:
#   {{ total_ranks }}, {{ tasks_per_node }}, {{ threads_per_process }},
#   {{ walltime }}, {{ output_file }}, {{ error_file }}
# options:
#   omp_flags: openmpi | minimal
#   log_layout: flat | nested
#   mail_directives: true | false
#   bare_fallback: true | false
"""


@dataclass
class EngineOptions:
    """Optional behaviours of the script generator"""
    omp_flags: str = "openmpi"      # 'openmpi' (thread/placement/binding flags) or 'minimal'
    launcher: str = "mpirun"
    time_launch: bool = True         # Prefix the launcher with `time`
    log_layout: str = "flat"        # 'flat' (log/name.out) or 'nested' (log/name/name.out)
    mail_directives: bool = True
    shebang: str = "#!/bin/bash -l"
    bare_fallback: bool = True       # Autodetect falls back to a bare script

    def __post_init__(self):
        if self.omp_flags not in OMP_FLAG_SETS:
            raise ConfigurationError(
                f"Unknown omp_flags: {self.omp_flags} (expected one of {', '.join(OMP_FLAG_SETS)})")
        if self.log_layout not in LOG_LAYOUTS:
            raise ConfigurationError(
                f"Unknown log_layout: {self.log_layout} (expected one of {', '.join(LOG_LAYOUTS)})")
        if not isinstance(self.launcher, str) or not self.launcher:
            raise ConfigurationError("launcher must not be empty")
        if not isinstance(self.shebang, str) or not self.shebang.startswith('#!'):
            raise ConfigurationError(f"shebang must start with '#!': {self.shebang}")
        for name in ('time_launch', 'mail_directives', 'bare_fallback'):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineOptions':
        """Create EngineOptions from the `options` section of a job file"""
        if not isinstance(data, dict):
            raise ConfigurationError(f"options must be a mapping, got {type(data).__name__}")
        bad_keys = [key for key in data if not isinstance(key, str)]
        if bad_keys:
            raise ConfigurationError(f"Option names must be strings, got {bad_keys!r}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown options: {', '.join(unknown)}")
        return cls(**data)


def load_job_file(job_path: str) -> Tuple[JobSpec, EngineOptions]:
    """
    Load a job description from a YAML file.

    Args:
        job_path: Path to the job file

    Returns:
        (JobSpec, EngineOptions) tuple
    """
    if not os.path.exists(job_path):
        raise FileNotFoundError(f"Job file not found: {job_path}")

    with open(job_path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse job file {job_path}") from e

    try:
        return parse_job_data(data)
    except ConfigurationError as e:
        raise ConfigurationError(f"Invalid job file {job_path}") from e


def parse_job_data(data: Dict[str, Any]) -> Tuple[JobSpec, EngineOptions]:
    """
    Parse a job dictionary into JobSpec and EngineOptions objects.

    The optional top-level `options` mapping configures the engine,
    every other key describes the job.
    """
    if data is None:
        raise ConfigurationError("Job description is empty")
    if not isinstance(data, dict):
        raise ConfigurationError(f"Job description must be a mapping, got {type(data).__name__}")

    data = dict(data)
    options = EngineOptions.from_dict(data.pop('options', None) or {})
    spec = JobSpec.from_dict(data)

    return spec, options


def create_default_job() -> Dict[str, Any]:
    """
    Create a default job dictionary.
    Useful for generating template job files.
    """
    return {
        'name': 'my_job',
        'node_count': 2,
        'node_type': 'standard',
        'ranks_per_node': 4,
        'threads_per_process': 8,
        'walltime': '01:00:00',
        'email': 'user@example.com',
        'log_directory': 'logs',
        'working_directory': '$PBS_O_WORKDIR',
        'print_omp_environment': False,
        'module_pre_script': ['module purge'],
        'load_modules': ['gcc', 'openmpi'],
        'pre_script': ['export SCRATCH=/scratch/$USER'],
        'runtime_prefix': [],
        'executable': './simulation',
        'arguments': ['--ranks', '{{ total_ranks }}'],
        'post_script': ['echo done'],
        'directives': [],
        'options': {
            'omp_flags': 'openmpi',
            'log_layout': 'flat',
            'mail_directives': True,
        }
    }


def render_default_job() -> str:
    """Default job file as commented YAML text"""
    body = yaml.dump(create_default_job(), default_flow_style=False, sort_keys=False)
    return DEFAULT_JOB_HEADER + body


def save_default_job(path: str):
    """Save a default job file as template."""
    with open(path, 'w') as f:
        f.write(render_default_job())

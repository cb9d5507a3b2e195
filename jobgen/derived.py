# jobgen/derived.py
"""
Values computed from a job description
"""

import posixpath
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .config import EngineOptions
from .job import JobSpec
from .utils.helpers import format_walltime


@dataclass(frozen=True)
class DerivedFields:
    """Fields no job description stores directly"""
    total_ranks: int
    tasks_per_node: int
    walltime_text: str
    output_file: str
    error_file: str


def log_paths(spec: JobSpec, layout: str = "flat") -> Dict[str, str]:
    """
    Build output and error file paths.

    Paths are joined textually with POSIX separators; nothing is created
    or checked on disk.
    """
    if layout == "nested":
        base = posixpath.join(spec.log_directory, spec.name, spec.name)
    else:
        base = posixpath.join(spec.log_directory, spec.name)
    return {'output_file': f"{base}.out", 'error_file': f"{base}.err"}


def derive_fields(spec: JobSpec, options: Optional[EngineOptions] = None) -> DerivedFields:
    """Compute derived fields for one render"""
    options = options or EngineOptions()
    paths = log_paths(spec, options.log_layout)

    return DerivedFields(
        total_ranks=spec.node_count * spec.ranks_per_node,
        tasks_per_node=spec.ranks_per_node if spec.ranks_per_node > 0 else 1,
        walltime_text=format_walltime(spec.walltime),
        output_file=paths['output_file'],
        error_file=paths['error_file'],
    )


def template_context(spec: JobSpec, derived: DerivedFields) -> Dict[str, Any]:
    """Named fields available to directive and task line templates"""
    context = {
        'name': spec.name,
        'node_count': spec.node_count,
        'ranks_per_node': spec.ranks_per_node,
        'threads_per_process': spec.threads_per_process,
        'node_type': spec.node_type,
        'email': spec.email,
        'log_directory': spec.log_directory,
        'working_directory': spec.working_directory,
        'executable': spec.executable,
    }
    context.update(asdict(derived))
    # Walltime is exposed in its directive form
    context['walltime'] = derived.walltime_text
    return context

# jobgen/command.py
"""
Script body: module setup, pre/post commands and the task invocation
"""

import logging
from typing import List, Optional

from .config import EngineOptions
from .derived import DerivedFields, template_context
from .job import JobSpec
from .templating import render_template

log = logging.getLogger(__name__)


def build_launcher(options: Optional[EngineOptions] = None) -> str:
    """
    Build the MPI launcher template.

    The 'openmpi' flag set exports the OpenMP thread count and places
    one rank per group of cores; 'minimal' only passes the rank count.
    """
    options = options or EngineOptions()

    if options.omp_flags == "openmpi":
        flags = [
            "-x OMP_NUM_THREADS={{ threads_per_process }}",
            "-x OMP_PLACES=cores",
            "-n {{ total_ranks }}",
            "--map-by node:PE={{ threads_per_process }}",
            "--bind-to core",
        ]
    else:
        flags = ["-n {{ total_ranks }}"]

    launcher = " ".join([options.launcher] + flags)
    if options.time_launch:
        launcher = f"time {launcher}"
    return launcher


def build_task_line(spec: JobSpec, derived: DerivedFields,
                    options: Optional[EngineOptions] = None,
                    use_launcher: bool = True) -> str:
    """
    Build the line that runs the executable.

    Launcher (only for MPI layouts), runtime prefix, executable and
    arguments are joined with spaces, then rendered against the derived
    fields so arguments may reference e.g. {{ total_ranks }}.
    """
    parts = []

    if use_launcher and spec.uses_mpi:
        parts.append(build_launcher(options))

    if spec.runtime_prefix:
        parts.append(" ".join(spec.runtime_prefix))

    parts.append(spec.executable)

    if spec.arguments:
        parts.append(" ".join(spec.arguments))

    return render_template(" ".join(parts), template_context(spec, derived), "task")


def build_body(spec: JobSpec, derived: DerivedFields,
               options: Optional[EngineOptions] = None,
               use_launcher: bool = True) -> str:
    """Build the script body, one blank line between non-empty groups"""
    groups: List[List[str]] = []

    # Module environment setup, e.g. `module purge`
    groups.append(list(spec.module_pre_script))

    groups.append([f"module load {module}" for module in spec.load_modules])

    groups.append(list(spec.pre_script))

    # Working directory
    environment = []
    if spec.working_directory:
        environment.append(f"cd {spec.working_directory}")
    if spec.print_omp_environment:
        environment.append("export OMP_DISPLAY_ENV=true")
    groups.append(environment)

    groups.append([build_task_line(spec, derived, options, use_launcher)])

    groups.append(list(spec.post_script))

    sections = ["\n".join(group) for group in groups if group]
    log.debug("Assembled %d body sections", len(sections))
    return "\n\n".join(sections) + "\n"

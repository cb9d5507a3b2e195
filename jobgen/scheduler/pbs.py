# jobgen/scheduler/pbs.py
"""
PBS/OpenPBS scheduler implementation
"""

from typing import List
from .base import BaseScheduler
from ..batch import BatchSystem
from ..derived import DerivedFields
from ..job import JobSpec


class PBSScheduler(BaseScheduler):
    """PBS scheduler (OpenPBS select syntax)"""

    kind = BatchSystem.PBS

    @property
    def directive_prefix(self) -> str:
        return '#PBS'

    @property
    def script_extension(self) -> str:
        return '.pbs'

    def header_lines(self, spec: JobSpec, derived: DerivedFields) -> List[str]:
        """
        Build PBS directives.

        Every field is emitted even when empty or zero, PBS parses
        these lines textually.
        """
        lines = [self.options.shebang]

        # Job name and files
        lines.append(f"#PBS -N {spec.name}")
        lines.append(f"#PBS -e {derived.error_file}")
        lines.append(f"#PBS -o {derived.output_file}")

        # Mail on abort, begin, end
        if self.options.mail_directives:
            lines.append("#PBS -m abe")
            lines.append(f"#PBS -M {spec.email}")

        # Resource specification
        lines.append(f"#PBS -l {self._build_resource_line(spec)}")

        # Walltime
        lines.append(f"#PBS -l walltime={derived.walltime_text}")

        return lines

    def _build_resource_line(self, spec: JobSpec) -> str:
        """Build select statement: select=2:node_type=x:mpiprocs=4:ompthreads=2"""
        parts = [
            f"select={spec.node_count}",
            f"node_type={spec.node_type}",
            f"mpiprocs={spec.ranks_per_node}",
            f"ompthreads={spec.threads_per_process}",
        ]
        return ":".join(parts)

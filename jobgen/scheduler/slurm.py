# jobgen/scheduler/slurm.py
"""
SLURM scheduler implementation
"""

from typing import List
from .base import BaseScheduler
from ..batch import BatchSystem
from ..derived import DerivedFields
from ..job import JobSpec


class SLURMScheduler(BaseScheduler):
    """SLURM scheduler"""

    kind = BatchSystem.SLURM

    @property
    def directive_prefix(self) -> str:
        return '#SBATCH'

    @property
    def script_extension(self) -> str:
        return '.sbatch'

    def header_lines(self, spec: JobSpec, derived: DerivedFields) -> List[str]:
        """Build SLURM directives"""
        lines = [self.options.shebang]

        # Job name and files
        lines.append(f"#SBATCH --job-name={spec.name}")
        lines.append(f"#SBATCH --output={derived.output_file}")
        lines.append(f"#SBATCH --error={derived.error_file}")

        # Mail
        if self.options.mail_directives:
            lines.append("#SBATCH --mail-type=ALL")
            lines.append(f"#SBATCH --mail-user={spec.email}")

        # Resources
        lines.append(f"#SBATCH --nodes={spec.node_count}")
        lines.append(f"#SBATCH --ntasks-per-node={derived.tasks_per_node}")

        # Walltime
        lines.append(f"#SBATCH --time={derived.walltime_text}")

        return lines

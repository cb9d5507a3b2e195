# jobgen/scheduler/base.py
"""
Base scheduler interface
"""

from abc import ABC, abstractmethod
from typing import List
from ..batch import BatchSystem
from ..config import EngineOptions
from ..derived import DerivedFields, template_context
from ..job import JobSpec
from ..templating import render_template


class BaseScheduler(ABC):
    """Abstract base class for batch script header renderers"""

    kind: BatchSystem = BatchSystem.UNSUPPORTED

    # Whether the task line is wrapped in an MPI launcher for this scheduler
    uses_launcher: bool = True

    def __init__(self, options: EngineOptions = None):
        self.options = options or EngineOptions()

    @property
    @abstractmethod
    def directive_prefix(self) -> str:
        """Comment prefix the scheduler reads directives from"""
        pass

    @property
    @abstractmethod
    def script_extension(self) -> str:
        """File extension for batch scripts"""
        pass

    @abstractmethod
    def header_lines(self, spec: JobSpec, derived: DerivedFields) -> List[str]:
        """Standard directive lines, shebang included"""
        pass

    def build_header(self, spec: JobSpec, derived: DerivedFields) -> str:
        """
        Build the script header.

        Returns the standard directives followed by any extra directives
        from the job description, terminated by a blank line.
        """
        lines = self.header_lines(spec, derived)
        lines.extend(self.get_directives(spec, derived))
        lines.append("")
        return "\n".join(lines) + "\n"

    def format_directive(self, directive: str) -> str:
        """Prefix a directive unless it already carries the prefix"""
        if not directive.startswith(self.directive_prefix):
            directive = f"{self.directive_prefix} {directive}"
        return directive

    def get_directives(self, spec: JobSpec, derived: DerivedFields) -> List[str]:
        """Extra directives from the job description, rendered and prefixed"""
        if not spec.directives:
            return []
        context = template_context(spec, derived)
        return [self.format_directive(render_template(d, context, "header"))
                for d in spec.directives]

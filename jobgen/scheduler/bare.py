# jobgen/scheduler/bare.py
"""
Plain shell script without scheduler directives
"""

import logging
from typing import List
from .base import BaseScheduler
from ..batch import BatchSystem
from ..derived import DerivedFields
from ..job import JobSpec

log = logging.getLogger(__name__)


class BareScheduler(BaseScheduler):
    """No scheduler: the script runs the executable directly"""

    kind = BatchSystem.BARE
    uses_launcher = False

    @property
    def directive_prefix(self) -> str:
        return '#'

    @property
    def script_extension(self) -> str:
        return '.sh'

    def header_lines(self, spec: JobSpec, derived: DerivedFields) -> List[str]:
        return [self.options.shebang]

    def get_directives(self, spec: JobSpec, derived: DerivedFields) -> List[str]:
        if spec.directives:
            log.debug("Ignoring %d directives for bare script", len(spec.directives))
        return []

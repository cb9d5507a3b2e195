# jobgen/scheduler/__init__.py
from typing import Optional, Union

from .base import BaseScheduler
from .pbs import PBSScheduler
from .slurm import SLURMScheduler
from .bare import BareScheduler
from ..batch import BatchSystem
from ..config import EngineOptions
from ..exceptions import UnsupportedBatchSystemError

SCHEDULERS = {
    BatchSystem.PBS: PBSScheduler,
    BatchSystem.SLURM: SLURMScheduler,
    BatchSystem.BARE: BareScheduler,
}


def get_scheduler(kind: Union[str, BatchSystem],
                  options: Optional[EngineOptions] = None) -> BaseScheduler:
    """Header renderer for a resolved batch system"""
    scheduler_class = SCHEDULERS.get(BatchSystem.parse(kind))
    if scheduler_class is None:
        requested = kind.value if isinstance(kind, BatchSystem) else str(kind)
        raise UnsupportedBatchSystemError(requested)
    return scheduler_class(options)


__all__ = ['BaseScheduler', 'PBSScheduler', 'SLURMScheduler', 'BareScheduler',
           'SCHEDULERS', 'get_scheduler']

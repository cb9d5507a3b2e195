# jobgen/batch.py
"""
Batch system identifiers
"""

from enum import Enum


class BatchSystem(Enum):
    """Batch systems a script can be requested for"""
    PBS = "pbs"
    SLURM = "slurm"
    BARE = "bare"
    AUTODETECT = "autodetect"
    UNSUPPORTED = "unsupported"

    @classmethod
    def parse(cls, value) -> 'BatchSystem':
        """Map an identifier such as 'pbs' or 'Slurm' to a BatchSystem.

        Unknown identifiers map to UNSUPPORTED rather than raising, so the
        caller decides how to report them.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNSUPPORTED

    @property
    def is_concrete(self) -> bool:
        """True for batch systems a script can actually be rendered for"""
        return self in (BatchSystem.PBS, BatchSystem.SLURM, BatchSystem.BARE)


# Identifiers accepted on the command line
BATCH_CHOICES = [BatchSystem.PBS.value, BatchSystem.SLURM.value,
                 BatchSystem.BARE.value, BatchSystem.AUTODETECT.value]

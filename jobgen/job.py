# jobgen/job.py
"""
Job description
"""

from dataclasses import dataclass, field, fields
from datetime import timedelta
from typing import Any, Dict, Tuple

from .exceptions import ConfigurationError
from .utils.helpers import format_walltime, parse_walltime

# CamelCase keys accepted from older job files
LEGACY_KEYS = {
    'Name': 'name',
    'NumberOfNodes': 'node_count',
    'NodeType': 'node_type',
    'NumberOfMPIRanksPerNode': 'ranks_per_node',
    'NumberOfOMPThreadsPerProcess': 'threads_per_process',
    'Walltime': 'walltime',
    'Email': 'email',
    'LogDirectory': 'log_directory',
    'PrintOMPEnvironment': 'print_omp_environment',
    'LoadModules': 'load_modules',
    'WorkingDirectory': 'working_directory',
    'PreScript': 'pre_script',
    'EntryPoint': 'executable',
    'PostScript': 'post_script',
}

COUNT_FIELDS = ('node_count', 'ranks_per_node', 'threads_per_process')
TEXT_FIELDS = ('name', 'node_type', 'email', 'log_directory',
               'working_directory', 'executable')
LIST_FIELDS = ('module_pre_script', 'load_modules', 'pre_script',
               'runtime_prefix', 'arguments', 'post_script', 'directives')


@dataclass(frozen=True)
class JobSpec:
    """Description of a parallel job, read-only once loaded"""

    # Identity
    name: str = "job"

    # Parallel layout
    node_count: int = 1
    ranks_per_node: int = 0
    threads_per_process: int = 1
    node_type: str = ""

    # Limits and notification
    walltime: timedelta = field(default_factory=timedelta)
    email: str = ""

    # Files
    log_directory: str = ""
    working_directory: str = ""

    # Command
    executable: str = ""
    module_pre_script: Tuple[str, ...] = ()
    load_modules: Tuple[str, ...] = ()
    pre_script: Tuple[str, ...] = ()
    runtime_prefix: Tuple[str, ...] = ()
    arguments: Tuple[str, ...] = ()
    post_script: Tuple[str, ...] = ()

    # Scheduler directives appended after the standard header
    directives: Tuple[str, ...] = ()

    print_omp_environment: bool = False

    def __post_init__(self):
        for name in COUNT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")

        for name in TEXT_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string, got {getattr(self, name)!r}")

        # Sequences are stored as tuples so a JobSpec stays immutable
        for name in LIST_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise ConfigurationError(f"{name} must be a list of strings, got {value!r}")
            for item in value:
                if isinstance(item, bool) or not isinstance(item, (str, int, float)):
                    raise ConfigurationError(f"{name} items must be strings, got {item!r}")
            object.__setattr__(self, name, tuple(str(item) for item in value))

        walltime = parse_walltime(self.walltime)
        if walltime < timedelta(0):
            raise ConfigurationError(f"walltime must not be negative, got {self.walltime!r}")
        object.__setattr__(self, 'walltime', walltime)

        if not isinstance(self.print_omp_environment, bool):
            raise ConfigurationError(
                f"print_omp_environment must be true or false, got {self.print_omp_environment!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary suitable for YAML output"""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        data['walltime'] = format_walltime(self.walltime)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobSpec':
        """Create JobSpec from dictionary, accepting legacy key names"""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Job description must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = LEGACY_KEYS.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown job field: {key}")
            if name in kwargs:
                raise ConfigurationError(f"Job field given twice: {key}")
            # An empty YAML key loads as None
            if value is None:
                continue
            kwargs[name] = value

        return cls(**kwargs)

    @property
    def uses_mpi(self) -> bool:
        """True when an MPI layout is requested"""
        return self.ranks_per_node > 0

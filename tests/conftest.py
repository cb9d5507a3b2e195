"""
pytest configuration and fixtures
"""

import pytest
import tempfile
from datetime import timedelta
from pathlib import Path

from jobgen import JobSpec


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_spec():
    """Small MPI job"""
    return JobSpec(
        name="run1",
        node_count=2,
        ranks_per_node=4,
        threads_per_process=2,
        walltime=timedelta(seconds=3661),
        executable="./sim",
        arguments=["--fast"],
    )


@pytest.fixture
def full_spec():
    """Job with every optional field set"""
    return JobSpec(
        name="lbm",
        node_count=4,
        node_type="skylake",
        ranks_per_node=2,
        threads_per_process=20,
        walltime=timedelta(hours=12),
        email="user@example.com",
        log_directory="/home/user/logs",
        working_directory="/scratch/user/lbm",
        executable="./lbm",
        module_pre_script=["module purge"],
        load_modules=["gcc/12", "openmpi/4.1"],
        pre_script=["export LBM_HOME=$HOME/lbm", "ulimit -s unlimited"],
        runtime_prefix=["perf", "stat"],
        arguments=["--ranks", "{{ total_ranks }}", "input.cfg"],
        post_script=["echo finished"],
    )


@pytest.fixture
def sample_job_content():
    """Sample YAML job file content"""
    return """name: run1
node_count: 2
node_type: broadwell
ranks_per_node: 4
threads_per_process: 2
walltime: 1h1m1s
email: user@example.com
log_directory: logs
working_directory: /scratch/run1
load_modules:
  - gcc
  - openmpi
executable: ./sim
arguments:
  - --fast
post_script:
  - echo done
options:
  omp_flags: openmpi
  log_layout: nested
"""


@pytest.fixture
def sample_job_file(temp_dir, sample_job_content):
    """Create a sample job file for tests"""
    job_file = temp_dir / "job.yaml"
    with open(job_file, "w") as f:
        f.write(sample_job_content)
    return job_file


class RecordingProbe:
    """Stand-in for shutil.which that records each lookup"""

    def __init__(self, available=()):
        self.available = set(available)
        self.calls = []

    def __call__(self, name):
        self.calls.append(name)
        if name in self.available:
            return f"/usr/bin/{name}"
        return None


@pytest.fixture
def make_probe():
    """Factory for search path probes"""
    return RecordingProbe

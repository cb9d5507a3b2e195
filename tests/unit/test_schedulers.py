# tests/unit/test_schedulers.py
"""
Unit tests for scheduler header rendering
"""

import pytest

from jobgen import BatchSystem, EngineOptions, JobSpec, TemplateSubstitutionError
from jobgen import UnsupportedBatchSystemError
from jobgen.derived import derive_fields
from jobgen.scheduler import (
    BareScheduler,
    PBSScheduler,
    SLURMScheduler,
    get_scheduler,
)


class TestPBSScheduler:
    """Test PBS header"""

    def test_header(self, full_spec):
        header = PBSScheduler().build_header(full_spec, derive_fields(full_spec))

        assert header == (
            "#!/bin/bash -l\n"
            "#PBS -N lbm\n"
            "#PBS -e /home/user/logs/lbm.err\n"
            "#PBS -o /home/user/logs/lbm.out\n"
            "#PBS -m abe\n"
            "#PBS -M user@example.com\n"
            "#PBS -l select=4:node_type=skylake:mpiprocs=2:ompthreads=20\n"
            "#PBS -l walltime=12:00:00\n"
            "\n"
        )

    def test_empty_values_emitted(self):
        spec = JobSpec(name="x", node_count=0, ranks_per_node=0, threads_per_process=0)
        header = PBSScheduler().build_header(spec, derive_fields(spec))

        assert "#PBS -M \n" in header
        assert "#PBS -l select=0:node_type=:mpiprocs=0:ompthreads=0\n" in header
        assert "#PBS -l walltime=00:00:00\n" in header

    def test_mail_directives_disabled(self, full_spec):
        scheduler = PBSScheduler(EngineOptions(mail_directives=False))
        header = scheduler.build_header(full_spec, derive_fields(full_spec))
        assert "#PBS -m" not in header
        assert "#PBS -M" not in header

    def test_extra_directives(self, full_spec):
        spec = JobSpec.from_dict(dict(full_spec.to_dict(),
                                      directives=["-q {{ node_type }}", "#PBS -V"]))
        header = PBSScheduler().build_header(spec, derive_fields(spec))
        assert header.endswith("#PBS -l walltime=12:00:00\n#PBS -q skylake\n#PBS -V\n\n")

    def test_bad_directive_template(self):
        spec = JobSpec(name="x", directives=["-q {{ queue }}"])
        with pytest.raises(TemplateSubstitutionError) as excinfo:
            PBSScheduler().build_header(spec, derive_fields(spec))
        assert excinfo.value.segment == "header"


class TestSLURMScheduler:
    """Test SLURM header"""

    def test_header(self, full_spec):
        header = SLURMScheduler().build_header(full_spec, derive_fields(full_spec))

        assert header == (
            "#!/bin/bash -l\n"
            "#SBATCH --job-name=lbm\n"
            "#SBATCH --output=/home/user/logs/lbm.out\n"
            "#SBATCH --error=/home/user/logs/lbm.err\n"
            "#SBATCH --mail-type=ALL\n"
            "#SBATCH --mail-user=user@example.com\n"
            "#SBATCH --nodes=4\n"
            "#SBATCH --ntasks-per-node=2\n"
            "#SBATCH --time=12:00:00\n"
            "\n"
        )

    def test_tasks_per_node_without_mpi(self):
        spec = JobSpec(name="serial", ranks_per_node=0)
        header = SLURMScheduler().build_header(spec, derive_fields(spec))
        assert "#SBATCH --ntasks-per-node=1\n" in header

    def test_extra_directive_prefixed(self):
        spec = JobSpec(name="x", directives=["--partition=debug"])
        header = SLURMScheduler().build_header(spec, derive_fields(spec))
        assert "#SBATCH --partition=debug\n" in header


class TestBareScheduler:
    """Test bare header"""

    def test_shebang_only(self, full_spec):
        header = BareScheduler().build_header(full_spec, derive_fields(full_spec))
        assert header == "#!/bin/bash -l\n\n"

    def test_directives_ignored(self):
        spec = JobSpec(name="x", directives=["-q debug"])
        assert BareScheduler().build_header(spec, derive_fields(spec)) == "#!/bin/bash -l\n\n"

    def test_custom_shebang(self):
        spec = JobSpec(name="x")
        scheduler = BareScheduler(EngineOptions(shebang="#!/bin/sh"))
        assert scheduler.build_header(spec, derive_fields(spec)) == "#!/bin/sh\n\n"

    def test_no_launcher(self):
        assert not BareScheduler.uses_launcher
        assert PBSScheduler.uses_launcher
        assert SLURMScheduler.uses_launcher


class TestGetScheduler:
    """Test the scheduler registry"""

    @pytest.mark.parametrize("kind,cls,extension", [
        ("pbs", PBSScheduler, ".pbs"),
        (BatchSystem.SLURM, SLURMScheduler, ".sbatch"),
        ("bare", BareScheduler, ".sh"),
    ])
    def test_known(self, kind, cls, extension):
        scheduler = get_scheduler(kind)
        assert isinstance(scheduler, cls)
        assert scheduler.script_extension == extension

    @pytest.mark.parametrize("kind", ["lsf", BatchSystem.AUTODETECT, BatchSystem.UNSUPPORTED])
    def test_unsupported(self, kind):
        with pytest.raises(UnsupportedBatchSystemError, match="not supported"):
            get_scheduler(kind)

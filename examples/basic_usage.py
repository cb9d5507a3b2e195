#!/usr/bin/env python3
"""
Basic usage example for jobgen
"""

from datetime import timedelta

from jobgen import EngineOptions, JobSpec, generate_script, load_job_file

# Describe a job directly
spec = JobSpec(
    name="lbm",
    node_count=4,
    node_type="skylake",
    ranks_per_node=2,
    threads_per_process=20,
    walltime=timedelta(hours=12),
    email="user@example.com",
    log_directory="logs",
    working_directory="$PBS_O_WORKDIR",
    load_modules=["gcc/12", "openmpi/4.1"],
    executable="./lbm",
    # Derived values can be referenced in arguments
    arguments=["--ranks", "{{ total_ranks }}", "input.cfg"],
)

# Same job, one script per scheduler
for batch_system in ("pbs", "slurm", "bare"):
    print(f"==== {batch_system} ====")
    print(generate_script(spec, batch_system))

# Nested log directories and a plain `mpirun -n N` launcher
options = EngineOptions(log_layout="nested", omp_flags="minimal")
print(generate_script(spec, "slurm", options))

# Or load everything from a job file and let the host decide
spec, options = load_job_file("examples/job.yaml")
print(generate_script(spec, "autodetect", options))

# jobgen/cli.py
"""
Command line entry point: jobgen JOB_FILE [-b BATCH_SYSTEM]
"""

import argparse
import logging
import os
import sys

from .batch import BATCH_CHOICES, BatchSystem
from .config import LOG_LAYOUTS, OMP_FLAG_SETS, load_job_file, render_default_job
from .core import JobScriptGenerator
from .exceptions import JobgenError

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobgen",
        description="Generate a PBS, SLURM or plain shell batch script from a YAML job file.",
    )
    parser.add_argument("job_file", nargs="?", metavar="JOB_FILE",
                        help="YAML job description")
    parser.add_argument("-b", "--batch-system", choices=BATCH_CHOICES,
                        default=BatchSystem.AUTODETECT.value,
                        help="Batch system to use, or autodetect (default)")
    parser.add_argument("-o", "--output", metavar="PATH",
                        help="Write the script to PATH instead of stdout; a directory gets <name><extension>")
    parser.add_argument("--log-layout", choices=LOG_LAYOUTS,
                        help="Override the job file's log layout")
    parser.add_argument("--omp-flags", choices=OMP_FLAG_SETS,
                        help="Override the job file's launcher flag set")
    parser.add_argument("--template", action="store_true",
                        help="Print a template job file and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages")
    return parser


def format_error(error: BaseException) -> str:
    """Join an exception and its causes into one message"""
    messages = []
    while error is not None:
        messages.append(str(error))
        error = error.__cause__
    return ": ".join(messages)


def write_script(script: str, path: str):
    """Write script to path and make it executable"""
    with open(path, 'w') as f:
        f.write(script)
    os.chmod(path, 0o755)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.template:
        sys.stdout.write(render_default_job())
        return 0

    if not args.job_file:
        parser.error("Job file is not specified")

    try:
        spec, options = load_job_file(args.job_file)
        if args.log_layout:
            options.log_layout = args.log_layout
        if args.omp_flags:
            options.omp_flags = args.omp_flags

        generator = JobScriptGenerator(options)
        scheduler = generator.scheduler(args.batch_system)
        script = generator.generate(spec, scheduler.kind)

        if args.output:
            path = args.output
            if os.path.isdir(path):
                path = os.path.join(path, spec.name + scheduler.script_extension)
            write_script(script, path)
            log.info("Wrote %s", path)
        else:
            sys.stdout.write(script)
    except (JobgenError, OSError) as e:
        print(f"jobgen: cannot generate script for {args.job_file}: {format_error(e)}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

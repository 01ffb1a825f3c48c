"""Pass-through execution of the original ksops plugin.

When dry-run mode is not requested, ksops-dry-run must be indistinguishable
from ksops itself. The original plugin is executed with the unmodified
argument vector and environment.
"""

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from icecream import ic

from ksops_dry_run.exceptions import DelegationError


def _run_child(path: str, argv: Sequence[str], environ: Mapping[str, str]) -> int:
    """Run the plugin as a child process sharing our standard streams."""
    return subprocess.run([path, *argv[1:]], env=dict(environ), check=False).returncode


def exec_plugin(path: str, argv: Sequence[str], environ: Mapping[str, str]) -> None:
    """Replace the current process with the plugin at path.

    On POSIX systems the process image is replaced with execve, so a
    successful call never returns. Elsewhere the plugin runs as a child
    process, and its exit code becomes ours.

    Args:
        path: Path to the plugin executable.
        argv: Argument vector, including the program name.
        environ: Environment for the plugin.

    Raises:
        DelegationError: If the plugin cannot be started.

    """
    ic(path, argv)
    try:
        if os.name != "posix":
            sys.exit(_run_child(path, argv, environ))
        # Nothing buffered may be lost when the image is replaced.
        sys.stdout.flush()
        sys.stderr.flush()
        os.execve(path, list(argv), dict(environ))
    except OSError as err:
        raise DelegationError(f"Failed to execute ksops plugin '{path}': {err}") from err

"""
Task Executor for wtask

Resolves an alias against the loaded task table, starts the task's command
as a child process and ends this process with the child's exit status.

Two stream policies are supported by the same code path:
- INHERIT: the child writes straight to this process's stdout/stderr
- PIPE: stdout and stderr are captured and copied chunk by chunk to this
  process's streams, each stream drained by its own thread

stdin is always inherited so interactive commands keep working.
"""

import contextlib
import logging
import os
import platform
import signal
import subprocess
import sys
import threading
from enum import Enum
from typing import BinaryIO, Iterator, List, NoReturn, Optional

import click

from wtask.core.errors import SpawnError, TaskNotFoundError
from wtask.core.models import Task, TaskTable

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class StreamPolicy(str, Enum):
    """How the child's stdout and stderr reach the terminal."""

    INHERIT = "inherit"
    PIPE = "pipe"


def split_command(command: str, system: Optional[str] = None) -> List[str]:
    """
    Turn a task's ``run`` string into an argv list.

    On Windows the whole string goes to ``cmd /c``. Everywhere else it is
    split on single ASCII spaces with no quoting support, so an argument
    cannot contain a space and consecutive spaces yield empty arguments.

    Args:
        command: The task's ``run`` value
        system: ``platform.system()`` value, detected when omitted

    Returns:
        Argument vector for the child process
    """
    system = system or platform.system()
    if system == "Windows":
        return ["cmd", "/c", command]
    return command.split(" ")


def exit_status(returncode: int) -> int:
    """Map a Popen return code to a process exit status (signal N -> 128+N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def _binary_stream(stream) -> BinaryIO:
    return getattr(stream, "buffer", stream)


def _drain(source: BinaryIO, sink: BinaryIO) -> None:
    """Copy ``source`` to ``sink`` until EOF, flushing every chunk."""
    try:
        for chunk in iter(lambda: source.read1(CHUNK_SIZE), b""):
            sink.write(chunk)
            sink.flush()
    except BrokenPipeError:
        logger.debug("Output stream closed, no longer forwarding")
    finally:
        source.close()


@contextlib.contextmanager
def _child_owns_signals(proc: subprocess.Popen) -> Iterator[None]:
    """
    Route SIGINT/SIGTERM to the child while it runs.

    The terminal already sends SIGINT to the child, so it is ignored here;
    SIGTERM is forwarded. Previous handlers are restored on exit.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _forward(signum, frame):
        if signum != signal.SIGINT and proc.poll() is None:
            logger.debug("Forwarding signal %s to pid %s", signum, proc.pid)
            proc.send_signal(signum)

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _forward)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)


class TaskExecutor:
    """
    Runs tasks from a task table.

    ``run()`` returns the child's exit status and is what tests and other
    callers use; ``execute()`` is the CLI boundary and always exits the
    process.
    """

    def __init__(
        self,
        tasks: TaskTable,
        policy: StreamPolicy = StreamPolicy.INHERIT,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
    ):
        self.tasks = tasks
        self.policy = StreamPolicy(policy)
        self._stdout = stdout
        self._stderr = stderr

    def resolve(self, alias: str) -> Task:
        """
        Look up a task by alias.

        Raises:
            TaskNotFoundError: If the alias is not in the table
        """
        task = self.tasks.get(alias)
        if task is None:
            raise TaskNotFoundError(alias)
        return task

    def run(self, task: Task) -> int:
        """
        Start the task's command and wait for it.

        The environment is copied from ``os.environ`` at spawn time. With the
        PIPE policy both drain threads are joined before waiting on the exit
        status, so no output is lost after the child exits.

        Args:
            task: Task to run

        Returns:
            Exit status of the child

        Raises:
            SpawnError: If the command cannot be started
        """
        argv = split_command(task.run)
        piped = self.policy is StreamPolicy.PIPE
        logger.debug("Running %r (streams: %s)", argv, self.policy.value)

        if piped:
            # text written by us before the child's bytes must come out first
            sys.stdout.flush()
            sys.stderr.flush()

        try:
            proc = subprocess.Popen(
                argv,
                stdin=None,
                stdout=subprocess.PIPE if piped else None,
                stderr=subprocess.PIPE if piped else None,
                env=dict(os.environ),
            )
        except (OSError, ValueError) as e:
            raise SpawnError(task.run, e) from e

        with _child_owns_signals(proc):
            if piped:
                drains = [
                    threading.Thread(
                        target=_drain,
                        args=(proc.stdout, self._stdout or _binary_stream(sys.stdout)),
                        name="wtask-stdout",
                        daemon=True,
                    ),
                    threading.Thread(
                        target=_drain,
                        args=(proc.stderr, self._stderr or _binary_stream(sys.stderr)),
                        name="wtask-stderr",
                        daemon=True,
                    ),
                ]
                for thread in drains:
                    thread.start()
                for thread in drains:
                    thread.join()
            returncode = proc.wait()

        logger.debug("Process %s exited with %s", proc.pid, returncode)
        return exit_status(returncode)

    def execute(self, alias: str) -> NoReturn:
        """
        Run the task bound to ``alias`` and exit with its status.

        A missing alias or a command that cannot be started prints a
        diagnostic to stderr and exits with 1. Never returns.
        """
        try:
            task = self.resolve(alias)
            code = self.run(task)
        except TaskNotFoundError as e:
            click.secho(str(e), fg="red", err=True)
            sys.exit(1)
        except SpawnError as e:
            logger.error("Error executing task '%s' (%s): %s", alias, e.command, e.cause)
            sys.exit(1)
        sys.exit(code)


def execute(
    alias: str, tasks: TaskTable, policy: StreamPolicy = StreamPolicy.INHERIT
) -> NoReturn:
    """Run ``alias`` from ``tasks`` and exit the process with its status."""
    TaskExecutor(tasks, policy).execute(alias)

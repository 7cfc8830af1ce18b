import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import CommandIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    stdout: bytes
    returncode: int = 0


class CommandExecutor(ABC):
    """Runs an external program to completion and captures its stdout.

    Everything downstream of the executor only sees the returned bytes, so a
    double that hands back fixed output makes the whole pipeline deterministic.
    """

    @abstractmethod
    def run(self, program, args):
        raise NotImplementedError


class SubprocessExecutor(CommandExecutor):
    def run(self, program, args):
        command = [program, *args]
        logger.debug("running %s", " ".join(command))
        try:
            completed = subprocess.run(command, capture_output=True, check=False)
        except FileNotFoundError as e:
            raise CommandIOError(program, "program not found") from e
        except PermissionError as e:
            raise CommandIOError(program, "permission denied") from e
        except OSError as e:
            raise CommandIOError(program, e) from e
        # exit status is reported but not acted on; parsing decides success
        logger.debug("%s exited with status %d", program, completed.returncode)
        return CommandOutput(stdout=completed.stdout, returncode=completed.returncode)


class CannedExecutor(CommandExecutor):
    """Returns fixed stdout per program path and records every call."""

    def __init__(self, outputs):
        self.outputs = dict(outputs)
        self.calls = []

    def run(self, program, args):
        self.calls.append((program, tuple(args)))
        if program not in self.outputs:
            raise CommandIOError(program, "no canned output")
        stdout = self.outputs[program]
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        return CommandOutput(stdout=stdout, returncode=0)

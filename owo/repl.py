"""
Line-oriented REPL for owo.

Reads one line at a time from `stdin`; the line `exit` (or end of input) stops
the loop. Each other non-blank line is evaluated as a complete program against
a single Interpreter, so definitions persist between lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from owo import OwoValue, config
from owo.errors import OwoError
from owo.interpreter import Interpreter
from owo.printer import to_string, lambda_lines
from owo.types.lambda_fn import Lambda
from owo.types.void import VoidType

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str | None = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt if prompt is not None else config.get_prompt()

    def write_value(self, value: OwoValue) -> None:
        if isinstance(value, VoidType):
            return
        if isinstance(value, Lambda):
            for line in lambda_lines(value):
                print(line, file=self.stdout)
            return
        print(to_string(value), file=self.stdout)

    def run(self) -> None:
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            line = line.strip()
            if line == "exit":
                break
            if not line:
                continue
            try:
                value = self.interp.eval(line)
            except OwoError as ex:
                logger.debug("evaluation failed: %r", ex)
                print(ex, file=self.stdout)
                continue
            self.write_value(value)
        print("Exit..", file=self.stdout)

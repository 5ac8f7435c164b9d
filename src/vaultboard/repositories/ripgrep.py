"""Line matcher backed by the ripgrep executable."""

from __future__ import annotations

import logging
import re
import shlex
import shutil
import subprocess
from collections.abc import Iterator, Sequence
from pathlib import Path

from .protocol import LineMatch, LineMatcherUnavailable

logger = logging.getLogger(__name__)

# "relative/path.md:12:- [ ] text"; the path is the shortest prefix before ":<digits>:"
OUTPUT_LINE_RE = re.compile(r"^(?P<path>.+?):(?P<line>\d+):(?P<text>.*)$")


def parse_output_line(line: str) -> LineMatch | None:
    """Parse one line of ripgrep output, or None if it is malformed."""
    match = OUTPUT_LINE_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    return LineMatch(
        relative_path=match.group("path"),
        line_number=int(match.group("line")),
        text=match.group("text"),
    )


class RipgrepMatcher:
    """Run ``rg`` over a directory tree and stream its matches."""

    def __init__(self, executables: Sequence[str] = ("rg",)) -> None:
        """
        Initialize matcher.

        Args:
            executables: Candidate ripgrep paths or command names, tried in order
        """
        self.executables = list(executables)

    def resolve_executable(self) -> str:
        """Return the first candidate found on disk or in PATH."""
        for candidate in self.executables:
            resolved = shutil.which(candidate)
            if resolved:
                return resolved
        raise LineMatcherUnavailable(
            "ripgrep (rg) not found, tried: " + ", ".join(self.executables)
        )

    def build_command(
        self, executable: str, pattern: str, exclude_globs: Sequence[str]
    ) -> list[str]:
        """Build the rg command line for a search rooted at the working directory."""
        cmd = [
            executable,
            "--no-heading",
            "--with-filename",
            "--line-number",
            "--color",
            "never",
        ]
        for glob in exclude_globs:
            cmd.extend(["--glob", f"!{glob}"])
        cmd.extend(["-e", pattern, "."])
        return cmd

    def search(
        self,
        root: Path,
        pattern: str,
        exclude_globs: Sequence[str] = (),
    ) -> Iterator[LineMatch]:
        """Yield matches for pattern under root."""
        executable = self.resolve_executable()
        cmd = self.build_command(executable, pattern, exclude_globs)
        logger.debug("Running in %s: %s", root, shlex.join(cmd))

        try:
            proc = subprocess.Popen(
                cmd,
                cwd=root,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise LineMatcherUnavailable(f"Could not execute ripgrep: {e}") from e

        with proc:
            assert proc.stdout is not None
            for raw in proc.stdout:
                match = parse_output_line(raw)
                if match is None:
                    logger.debug("Skipping unparseable rg output: %r", raw)
                    continue
                yield match

        # 0 = matches, 1 = no matches, 2 = error (results may still be partial)
        if proc.returncode not in (0, 1):
            logger.warning("ripgrep exited with status %d in %s", proc.returncode, root)

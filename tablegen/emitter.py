"""Writing rendered files to disk and running the source formatter."""

import subprocess
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .codegen.core.schema import RenderedFile
from .logging_config import get_logger

logger = get_logger(__name__)


class EmitError(Exception):
    """Raised when a generated file cannot be written."""

    pass


class FormatterError(EmitError):
    """Raised when the formatter fails after the files were written."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        self.returncode = returncode
        super().__init__(message)


class Emitter:
    """Writes rendered files below an output root."""

    def __init__(
        self,
        output_dir: Union[str, Path] = ".",
        formatter: Optional[Sequence[str]] = ("gofmt", "-w"),
    ):
        """
        Args:
            output_dir: Root the relative file paths are resolved against
            formatter: Command run once over the output root; empty to skip
        """
        self.output_dir = Path(output_dir)
        self.formatter = list(formatter or [])

    def write(self, files: Iterable[RenderedFile]) -> List[Path]:
        """Write every file, then run the formatter.

        Files already written stay on disk when a later write or the
        formatter fails.

        Returns:
            Paths of the written files.

        Raises:
            EmitError: If a file cannot be written.
            FormatterError: If the formatter exits non-zero or is missing.
        """
        written = self.write_files(files)
        self.run_formatter()
        return written

    def write_files(self, files: Iterable[RenderedFile]) -> List[Path]:
        """Write files, overwriting existing ones."""
        written = []
        for rendered in files:
            path = self.output_dir / rendered.path
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_bytes(rendered.content)
            except OSError as e:
                raise EmitError(f"Failed to write {path}: {e}") from e
            logger.info("Wrote %s", path)
            written.append(path)
        return written

    def run_formatter(self) -> None:
        """Run the formatter over the output root, if one is configured."""
        if not self.formatter:
            logger.debug("No formatter configured")
            return

        command = [*self.formatter, str(self.output_dir)]
        logger.info("Running formatter: %s", " ".join(command))
        try:
            completed = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise FormatterError(f"Cannot run formatter {self.formatter[0]}: {e}") from e

        if completed.returncode != 0:
            output = (completed.stderr or completed.stdout).strip()
            raise FormatterError(
                f"Formatter {self.formatter[0]} exited with status "
                f"{completed.returncode}: {output}",
                returncode=completed.returncode,
            )

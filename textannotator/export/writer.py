"""File-writing collaborator for export payloads."""

from __future__ import annotations

import logging
from pathlib import Path

from textannotator.errors import ExportWriteError
from textannotator.export.exporter import ExportPayload

logger = logging.getLogger(__name__)


class ExportWriter:
    """Write export payloads into a directory.

    Parameters
    ----------
    output_dir : Path | str
        Directory to write into. Created on first write if missing.
    overwrite : bool
        Whether existing files may be replaced.

    Examples
    --------
    >>> writer = ExportWriter("exports")  # doctest: +SKIP
    >>> writer.write(payload)  # doctest: +SKIP
    PosixPath('exports/report_annotations.json')
    """

    def __init__(self, output_dir: Path | str, overwrite: bool = False) -> None:
        self.output_dir = Path(output_dir)
        self.overwrite = overwrite

    def target_path(self, export: ExportPayload) -> Path:
        """Return the path an export would be written to.

        Parameters
        ----------
        export : ExportPayload
            Export to place.

        Returns
        -------
        Path
            Destination path.
        """
        return self.output_dir / export.suggested_filename

    def write(self, export: ExportPayload) -> Path:
        """Write an export under its suggested filename.

        Parameters
        ----------
        export : ExportPayload
            Export to write.

        Returns
        -------
        Path
            Path of the written file.

        Raises
        ------
        ExportWriteError
            If the file exists and overwriting is disabled, or the write
            fails.
        """
        path = self.target_path(export)
        if path.exists() and not self.overwrite:
            raise ExportWriteError(f"File already exists: {path}")
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(export.payload, encoding="utf-8")
        except OSError as e:
            raise ExportWriteError(f"Failed to write {path}: {e}") from e
        logger.info("Wrote %s (%s)", path, export.mime_type)
        return path

"""Local file output that never overwrites an existing file."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from klistra.common.errors import LocalWriteFailed

from .models import OutcomeKind, PublishOutcome

logger = logging.getLogger(__name__)

OUTPUT_MODE = 0o644


def write_if_absent(path: str | Path, content: str) -> PublishOutcome:
    """Write ``content`` to ``path`` unless a file is already there.

    An existing file is left untouched and reported as ALREADY_EXISTS,
    which is a success. The content goes to a temporary file in the same
    directory first and is renamed into place only once fully written, so
    a failed write never leaves a truncated ``path`` behind. The existence
    check and the rename are not atomic.

    Raises:
        LocalWriteFailed: the filesystem rejected the write
    """
    output_path = Path(path)

    if output_path.exists():
        logger.info("Local file already exists, skipping: %s", output_path)
        return PublishOutcome(kind=OutcomeKind.ALREADY_EXISTS, location=str(output_path))

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(content)
        os.chmod(tmp_name, OUTPUT_MODE)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name is not None:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
        raise LocalWriteFailed(f"Could not write {output_path}: {e}") from e

    logger.info("Local HTML exported: %s", output_path)
    return PublishOutcome(kind=OutcomeKind.CREATED, location=str(output_path))

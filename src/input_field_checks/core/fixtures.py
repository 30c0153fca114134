"""Sample upload files used by the file input checks."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from .errors import FieldConfigError

SAMPLE_FILE_NAMES = ("sample.webp", "sample.jpg")


def sample_files(assets_dir: Path) -> Tuple[Path, ...]:
    """Returns the absolute paths of the sample upload files."""

    paths = tuple((assets_dir / name).resolve() for name in SAMPLE_FILE_NAMES)
    missing = [str(path) for path in paths if not path.is_file()]
    if missing:
        raise FieldConfigError(f"Sample upload files not found: {', '.join(missing)}")
    return paths

"""Writers for rendered generator output."""

from pathlib import Path
from typing import Callable, Dict, List, Optional
from modelgen.utils.error_logging import log_error
from modelgen.config.logging import get_logger

logger = get_logger(__name__)

Confirm = Callable[[Path], bool]
Report = Callable[[str], None]


def create_file(
    path: Path,
    contents: str,
    confirm: Optional[Confirm] = None,
    force: bool = False,
    report: Optional[Report] = None,
) -> bool:
    """
    Write one generated file, creating parent directories.

    An existing file is only replaced when force is set or confirm(path)
    returns True; without a confirm callback it is kept.

    Args:
        path: Destination path
        contents: File contents
        confirm: Asked whether to overwrite an existing file
        force: Overwrite without asking
        report: Receives "* creating <path>" style progress lines

    Returns:
        True if the file was written
    """
    path = Path(path)
    if path.exists() and not force:
        if confirm is None or not confirm(path):
            logger.info(f"Skipping existing file {path}")
            if report:
                report(f"* skipping {path}")
            return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
    except OSError as e:
        log_error(error=e, operation="writing generated file", path=str(path))
        raise

    logger.debug(f"Wrote {len(contents)} characters to {path}")
    if report:
        report(f"* creating {path}")
    return True


def write_files(
    rendered: Dict[Path, str],
    confirm: Optional[Confirm] = None,
    force: bool = False,
    report: Optional[Report] = None,
) -> List[Path]:
    """
    Write every rendered file in order.

    Returns:
        Paths that were written
    """
    written = []
    for path, contents in rendered.items():
        if create_file(path, contents, confirm=confirm, force=force, report=report):
            written.append(path)
    logger.info(f"Wrote {len(written)} of {len(rendered)} generated file(s)")
    return written

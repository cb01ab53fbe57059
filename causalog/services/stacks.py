"""
Stack text for logged errors.

Raised errors use their traceback. Errors built by the assertion engine but
never raised fall back to the stack captured when they were constructed.
"""

import os
import sysconfig
import traceback
from typing import List, Optional

from causalog.models.error import ErrorRecord

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_LIBRARY_DIRS = tuple(
    os.path.abspath(path)
    for path in {sysconfig.get_paths().get(name) for name in ("stdlib", "platstdlib", "purelib", "platlib")}
    if path
)


def is_internal_frame(frame: traceback.FrameSummary) -> bool:
    """Frames hidden by concise filtering: this package, the stdlib and installed libraries."""
    filename = os.path.abspath(frame.filename)
    return filename.startswith(PACKAGE_DIR + os.sep) or filename.startswith(_LIBRARY_DIRS)


def _filter(frames: List[traceback.FrameSummary], concise: bool) -> List[traceback.FrameSummary]:
    if not concise:
        return list(frames)
    return [frame for frame in frames if not is_internal_frame(frame)]


def capture_construction_stack(skip: int = 0) -> traceback.StackSummary:
    """Capture the caller's stack, dropping ``skip`` innermost frames plus this one."""
    frames = traceback.extract_stack()
    return traceback.StackSummary.from_list(frames[: len(frames) - 1 - skip])


def format_frames(frames: List[traceback.FrameSummary]) -> str:
    return "".join(traceback.format_list(frames))


def stack_text(error: BaseException, record: Optional[ErrorRecord], concise: bool = True) -> str:
    """
    Stack text of an error, ending with the ``Type: message`` line.

    Args:
        error: Error to describe
        record: Its diagnostic record, if any
        concise: Drop frames from this package, the stdlib and site-packages
    """
    header = "".join(traceback.format_exception_only(type(error), error))

    if error.__traceback__ is not None:
        frames = _filter(traceback.extract_tb(error.__traceback__), concise)
        body = format_frames(frames)
    elif record is not None and record.construction_frames:
        body = format_frames(_filter(record.construction_frames, concise))
    else:
        body = ""

    if not body:
        return header
    return "Traceback (most recent call last):\n" + body + header

"""Writing serialized element trees to disk."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .errors import SvgWriteError

if TYPE_CHECKING:
    from .elements import Element

logger = logging.getLogger(__name__)


def write_svg(element: "Element", path: Union[str, Path], *, encoding: str = "utf-8") -> Path:
    """Serialize ``element`` and write it to ``path``, returning the path written."""
    target = Path(path)
    try:
        target.write_text(element.serialize() + "\n", encoding=encoding)
    except OSError as exc:
        raise SvgWriteError(target, hint=str(exc)) from exc
    logger.info("Wrote %s", target)
    return target


__all__ = ["write_svg"]

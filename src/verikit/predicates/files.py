"""File predicates. The value is a path (str or path-like)."""

from __future__ import annotations

import os
import pathlib
from typing import Optional, Union

from verikit.predicates.catalog import Catalog, shows
from verikit.predicates.objects import OBJECTS

FILES = Catalog("file", parent=OBJECTS)

PathArg = Union[str, os.PathLike]


def _read_text(path: PathArg) -> Optional[str]:
    """Text content of *path*, or None when it is not a regular file."""
    p = pathlib.Path(path)
    if not p.is_file():
        return None
    return p.read_text(encoding="utf-8")


@FILES.predicate("file exists", expected=shows("<exists>"))
def exists(actual: PathArg) -> bool:
    return pathlib.Path(actual).exists()


@FILES.predicate("file does not exist", expected=shows("<does not exist>"))
def is_not_exists(actual: PathArg) -> bool:
    return not pathlib.Path(actual).exists()


@FILES.predicate("file content equals the content of {expected}",
                 requires=("actual", "expected"))
def equals_string_content(actual: PathArg, expected: PathArg) -> bool:
    content = _read_text(actual)
    return content is not None and content == _read_text(expected)


@FILES.predicate("file content does not equal the content of {expected}",
                 requires=("actual", "expected"))
def not_equals_string_content(actual: PathArg, expected: PathArg) -> bool:
    # the file under test must be readable for the comparison to mean anything
    content = _read_text(actual)
    return content is not None and content != _read_text(expected)

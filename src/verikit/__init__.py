"""verikit: named predicate checks with bounded waiting."""

__version__ = "0.1.0"

from verikit.core.errors import VerificationError, VerikitError  # noqa: E402
from verikit.verifier import (  # noqa: E402
    BoolVerifier,
    CollectionVerifier,
    FileVerifier,
    MapVerifier,
    NumberVerifier,
    ObjectVerifier,
    StringVerifier,
    Verifier,
    verifier_for,
)
from verikit.waits import wait_for, wait_until  # noqa: E402

__all__ = [
    "BoolVerifier",
    "CollectionVerifier",
    "FileVerifier",
    "MapVerifier",
    "NumberVerifier",
    "ObjectVerifier",
    "StringVerifier",
    "VerificationError",
    "Verifier",
    "VerikitError",
    "__version__",
    "verifier_for",
    "wait_for",
    "wait_until",
]

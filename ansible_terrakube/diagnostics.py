"""Collection of the problems found while inferring and converting values."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

UNSUPPORTED_VALUE = "Unsupported Value"
TYPE_MISMATCH = "Type Mismatch"
ARITY_MISMATCH = "Arity Mismatch"
UNSUPPORTED_CONVERSION = "Unsupported Conversion"
MISSING_SENSITIVITY = "Missing Sensitivity Flag"


class Severity(str, Enum):
    error = "error"
    warning = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single problem. ``path`` locates the failing branch, when known."""

    severity: Severity
    summary: str
    detail: str
    path: str = ""

    def __str__(self) -> str:
        location = f" at {self.path}" if self.path else ""
        return f"{self.summary}{location}: {self.detail}"

    def as_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "summary": self.summary,
            "detail": self.detail,
            "path": self.path,
        }


class Diagnostics:
    """An ordered, append-only collector of diagnostics."""

    def __init__(self):
        self._items: List[Diagnostic] = []

    def append(self, diagnostic: Diagnostic):
        self._items.append(diagnostic)

    def extend(self, other: "Diagnostics"):
        self._items.extend(other)

    def add_error(self, summary: str, detail: str, path: str = ""):
        self.append(Diagnostic(Severity.error, summary, detail, path))

    def add_warning(self, summary: str, detail: str, path: str = ""):
        self.append(Diagnostic(Severity.warning, summary, detail, path))

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.error]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.warning]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"

    def report(self, module) -> List[str]:
        """
        Forwards warnings to the Ansible module and returns the error messages,
        numbered in the order they were recorded. Deciding whether to fail is
        left to the caller.
        """
        for warning in self.warnings:
            module.warn(str(warning))
        return [f"{i}. {error}" for i, error in enumerate(self.errors, 1)]

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Protocol, Tuple, Union

from .errors import ReportFormatError

DEFAULT_METRIC = "lloc"

ReportValue = Union[int, str, Dict[str, int]]


class CollectionKind(Enum):
    FILE = "file"
    FUNCTION = "function"

    @property
    def xml_path(self) -> str:
        return _XML_PATHS[self]


_XML_PATHS = {
    CollectionKind.FILE: "files/file",
    CollectionKind.FUNCTION: "package/function",
}


@dataclass(frozen=True)
class Item:
    name: str
    attributes: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def metric(self, name: str = DEFAULT_METRIC) -> int:
        raw = self.attributes.get(name)
        if raw is None:
            raise ReportFormatError(
                f"Item '{self.name}' has no '{name}' attribute"
            )
        digits = raw.strip()
        if not (digits.isascii() and digits.isdigit()):
            raise ReportFormatError(
                f"Item '{self.name}' has a '{name}' value that is not "
                f"a non-negative integer: {raw!r}"
            )
        return int(digits)


class MetricSource(Protocol):
    """Anything that yields ordered (name, metric) pairs for one population."""

    @property
    def label(self) -> str:
        ...

    def entries(self, metric: str = DEFAULT_METRIC) -> List[Tuple[str, int]]:
        ...


@dataclass(frozen=True)
class ItemCollection:
    kind: CollectionKind
    items: Tuple[Item, ...] = ()

    @property
    def label(self) -> str:
        return self.kind.value

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def entries(self, metric: str = DEFAULT_METRIC) -> List[Tuple[str, int]]:
        return [(item.name, item.metric(metric)) for item in self.items]


@dataclass
class AggregateResult:
    max: int
    all: Dict[str, int]
    max_name: str
    average: int
    mean: int


class ReportBuffer:
    """
    Ordered label -> value results of one run.

    Writing an existing label replaces its value and keeps its position.
    """

    def __init__(self) -> None:
        self._lines: Dict[str, ReportValue] = {}

    def line(self, label: str, value: ReportValue) -> None:
        self._lines[label] = value

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._lines.items())

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, label: str) -> ReportValue:
        return self._lines[label]

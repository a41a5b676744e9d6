"""
pDepend summary report loader

Reads the XML written by ``pdepend --summary-xml`` and exposes the
file and function populations as item collections.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Tuple, Union

from lloc_stats.core.errors import ReportFormatError, ReportParseError
from lloc_stats.core.models import CollectionKind, Item, ItemCollection

LOGGER_NAME = "lloc_stats.source"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)


class PDependReport:
    def __init__(self, root: ET.Element):
        self.root = root

    def files(self) -> ItemCollection:
        return self.collection(CollectionKind.FILE)

    def functions(self) -> ItemCollection:
        return self.collection(CollectionKind.FUNCTION)

    def collection(self, kind: CollectionKind) -> ItemCollection:
        section_tag, item_tag = kind.xml_path.split("/")

        # only the first matching section is read
        section = self.root.find(section_tag)
        if section is None:
            raise ReportFormatError(
                f"Report has no <{section_tag}> section for {kind.value} items"
            )

        items = tuple(_to_item(el, kind) for el in section.findall(item_tag))
        logger.info("Loaded %d %s items", len(items), kind.value)
        return ItemCollection(kind=kind, items=items)


def _to_item(element: ET.Element, kind: CollectionKind) -> Item:
    name = element.get("name")
    if name is None:
        raise ReportFormatError(f"A {kind.value} item has no name attribute")
    return Item(name=name, attributes=dict(element.attrib))


def load_report(path: Union[str, Path]) -> PDependReport:
    path = Path(path)
    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as exc:
        raise ReportParseError(
            "Your XML file does not seem to be valid: "
            f"it cannot be parsed ({path})"
        ) from exc

    logger.info("Loaded report %s", path)
    return PDependReport(tree.getroot())


def load_collections(path: Union[str, Path]) -> Tuple[ItemCollection, ItemCollection]:
    report = load_report(path)
    return report.files(), report.functions()

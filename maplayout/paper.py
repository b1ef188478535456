"""
Paper sizes by format name, in canvas units (1/100 inch).

Standard formats come from reportlab's page size table; a printer may add
formats of its own which take precedence over the standard ones.
"""

from typing import Dict, List, Optional, Protocol, Tuple

from reportlab.lib.pagesizes import (
    A0,
    A1,
    A2,
    A3,
    A4,
    A5,
    A6,
    B4,
    B5,
    ELEVENSEVENTEEN,
    LEGAL,
    LETTER,
    TABLOID,
    portrait,
)

from maplayout.logger import logger
from maplayout.project_types import PaperSize, PrinterContext
from maplayout.scale import CANVAS_UNITS_PER_POINT

STANDARD_FORMATS_POINTS: Dict[str, Tuple[float, float]] = {
    "A0": A0,
    "A1": A1,
    "A2": A2,
    "A3": A3,
    "A4": A4,
    "A5": A5,
    "A6": A6,
    "B4": B4,
    "B5": B5,
    "Letter": LETTER,
    "Legal": LEGAL,
    "Tabloid": TABLOID,
    "11x17": ELEVENSEVENTEEN,
}


def paper_size_from_points(name: str, pagesize: Tuple[float, float]) -> PaperSize:
    # Printer drivers report sizes in whole hundredths of an inch
    width, height = portrait(pagesize)
    return PaperSize(
        name=name,
        width=round(width * CANVAS_UNITS_PER_POINT),
        height=round(height * CANVAS_UNITS_PER_POINT),
    )


class PaperSizeLookup(Protocol):
    def try_get_paper_size(
        self, format_name: str, printer: PrinterContext | None = None
    ) -> Optional[PaperSize]: ...


class StandardPaperSizes:
    def __init__(self, formats: Dict[str, Tuple[float, float]] | None = None):
        formats = STANDARD_FORMATS_POINTS if formats is None else formats
        self.paper_sizes: Dict[str, PaperSize] = {
            name.lower(): paper_size_from_points(name, pagesize)
            for name, pagesize in formats.items()
        }

    def try_get_paper_size(
        self, format_name: str, printer: PrinterContext | None = None
    ) -> Optional[PaperSize]:
        key = (format_name or "").strip().lower()

        if printer is not None:
            for name, paper_size in printer.paper_sizes.items():
                if name.lower() == key:
                    return paper_size

        paper_size = self.paper_sizes.get(key)
        if paper_size is None:
            printer_name = printer.name if printer is not None else "default"
            logger.warning(
                f"Unknown paper format {format_name!r} for printer {printer_name!r}"
            )
        return paper_size

    def format_names(self, printer: PrinterContext | None = None) -> List[str]:
        names = [paper_size.name for paper_size in self.paper_sizes.values()]
        if printer is not None:
            known = {name.lower() for name in names}
            names.extend(
                name for name in printer.paper_sizes if name.lower() not in known
            )
        return names

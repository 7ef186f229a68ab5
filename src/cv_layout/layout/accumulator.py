"""Running page state for one column of a pagination run.

The accumulator is a small state machine:

    ACCUMULATING --request_break()--> SEAL_AND_ADVANCE --advance()--> ACCUMULATING
    ACCUMULATING --finish()--> DONE

Sealing pushes the current page to the output only when it holds content, so
a break on an empty page never produces a blank page.
"""

from __future__ import annotations

from enum import Enum

from cv_layout.models.page import Page, PartialSectionRecord
from cv_layout.models.section import TemplateSection


class PackingState(str, Enum):
    ACCUMULATING = "accumulating"
    SEAL_AND_ADVANCE = "seal_and_advance"
    DONE = "done"


class PageAccumulator:
    """Sealed pages plus the page being filled and its used height."""

    def __init__(self, content_height: float, max_pages: int):
        self.content_height = content_height
        self.max_pages = max_pages
        self.pages: list[Page] = []
        self.current = Page(page_number=1)
        self.height = 0.0
        self.state = PackingState.ACCUMULATING

    @property
    def available(self) -> float:
        return self.content_height - self.height

    @property
    def at_capacity(self) -> bool:
        """No further page may be started once max_pages pages are sealed."""
        return len(self.pages) >= self.max_pages

    def fits(self, height: float) -> bool:
        return self.height + height <= self.content_height

    def needs_break(self, height: float) -> bool:
        """Whether a whole block must move to a fresh page.

        A block taller than the page still goes on an empty page.
        """
        return self.current.has_content and not self.fits(height)

    def _check_open(self) -> None:
        if self.state is PackingState.DONE:
            raise RuntimeError("Pagination run already finished")

    def place(self, section: TemplateSection, height: float) -> None:
        """List a section on the current page (once) and consume its height."""
        self._check_open()
        if not self.current.has_section(section.id):
            self.current.sections.append(section)
        self.height += height

    def record_partial(
        self, section: TemplateSection, record: PartialSectionRecord, height: float
    ) -> None:
        self.place(section, height)
        self.current.partial_sections[section.id] = record

    def request_break(self) -> None:
        self._check_open()
        self.state = PackingState.SEAL_AND_ADVANCE

    def advance(self) -> bool:
        """Carry out a requested break. Returns True when a page was sealed."""
        if self.state is not PackingState.SEAL_AND_ADVANCE:
            return False
        sealed = False
        if self.current.has_content:
            self.pages.append(self.current)
            sealed = True
        self.current = Page(page_number=len(self.pages) + 1)
        self.height = 0.0
        self.state = PackingState.ACCUMULATING
        return sealed

    def seal(self) -> bool:
        self.request_break()
        return self.advance()

    def finish(self, ensure_page: bool = True) -> list[Page]:
        """Seal the last page and return the output.

        With ensure_page, an empty run still yields one empty page.
        """
        self._check_open()
        if self.current.has_content:
            self.pages.append(self.current)
        if ensure_page and not self.pages:
            self.pages.append(Page(page_number=1))
        self.state = PackingState.DONE
        return self.pages

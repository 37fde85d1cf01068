"""PDF activity report.

Layout (A4, 50pt margins): title, generation time and report window, user
information, per-type activity summary, then a striped table of the most recent
activities. Generating a report is itself recorded as a ``pdf_download``
activity before the data is read, so the report always includes itself.
"""

from __future__ import annotations

import calendar
import datetime as dt
import io
import logging
import uuid

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas
from sqlalchemy.orm import Session

from usermetrics.core.errors import InternalError
from usermetrics.models.enums import ActivityType
from usermetrics.models.user import as_utc
from usermetrics.services.activity import ActivityReport, load_activity_report, record_activity

logger = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 50
TABLE_WIDTH = 500
HEADER_HEIGHT = 20
ROW_HEIGHT = 25

ACCENT = colors.HexColor("#1e40af")
MUTED = colors.HexColor("#6b7280")
HEADER_FILL = colors.HexColor("#f3f4f6")
STRIPE_FILL = colors.HexColor("#f9fafb")
TEXT = colors.black

FONT = "Helvetica"

# (x offset from the left margin, label, column width)
TABLE_COLUMNS = (
    (10, "Activity Type", 180),
    (200, "Timestamp", 140),
    (350, "Details", 145),
)


def report_filename(user_id: uuid.UUID) -> str:
    return f"user-activity-{user_id}.pdf"


def one_month_before(day: dt.date) -> dt.date:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def _fmt_ts(ts: dt.datetime) -> str:
    return as_utc(ts).strftime("%Y-%m-%d %H:%M:%S UTC")


def _fit(text: str, width: float, size: float) -> str:
    if stringWidth(text, FONT, size) <= width:
        return text
    ellipsis = "..."
    while text and stringWidth(text + ellipsis, FONT, size) > width:
        text = text[:-1]
    return text + ellipsis


class _PageWriter:
    """Top-down cursor over a reportlab canvas; starts a new page when the bottom margin is reached."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.y = PAGE_HEIGHT - MARGIN

    def _ensure_space(self, height: float) -> bool:
        if self.y - height >= MARGIN:
            return False
        self.c.showPage()
        self.y = PAGE_HEIGHT - MARGIN
        return True

    def line(self, text: str, *, size: float, color=TEXT, align: str = "left") -> None:
        leading = size * 1.2
        self._ensure_space(leading)
        self.y -= leading
        self.c.setFont(FONT, size)
        self.c.setFillColor(color)
        if align == "center":
            self.c.drawCentredString(PAGE_WIDTH / 2, self.y, text)
        elif align == "right":
            self.c.drawRightString(PAGE_WIDTH - MARGIN, self.y, text)
        else:
            self.c.drawString(MARGIN, self.y, text)

    def gap(self, lines: float = 1.0, size: float = 12) -> None:
        self.y -= size * 1.2 * lines

    def table_header(self) -> None:
        self._ensure_space(HEADER_HEIGHT + ROW_HEIGHT)
        top = self.y
        self.c.setFillColor(HEADER_FILL)
        self.c.rect(MARGIN, top - HEADER_HEIGHT, TABLE_WIDTH, HEADER_HEIGHT, stroke=0, fill=1)
        self.c.setFont(FONT, 12)
        self.c.setFillColor(ACCENT)
        for offset, label, _ in TABLE_COLUMNS:
            self.c.drawString(MARGIN + offset, top - 15, label)
        self.y = top - HEADER_HEIGHT - 5

    def table_row(self, index: int, cells: tuple[str, str, str]) -> None:
        if self._ensure_space(ROW_HEIGHT):
            self.table_header()
        top = self.y
        if index % 2 == 0:
            self.c.setFillColor(STRIPE_FILL)
            self.c.rect(MARGIN, top - ROW_HEIGHT, TABLE_WIDTH, ROW_HEIGHT, stroke=0, fill=1)
        self.c.setFont(FONT, 10)
        self.c.setFillColor(TEXT)
        for (offset, _, width), value in zip(TABLE_COLUMNS, cells):
            self.c.drawString(MARGIN + offset, top - 15, _fit(value, width, 10))
        self.y = top - ROW_HEIGHT


def render_activity_report(report: ActivityReport) -> bytes:
    user = report.user
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Activity Report - {user.name}")
    c.setAuthor("User Management System")

    w = _PageWriter(c)
    w.line("User Activity Report", size=24, color=ACCENT, align="center")
    w.gap()

    today = report.generated_at.date()
    w.line(f"Generated on: {_fmt_ts(report.generated_at)}", size=10, color=MUTED, align="right")
    w.line(
        f"Report Duration: {one_month_before(today):%Y-%m-%d} - {today:%Y-%m-%d}",
        size=10,
        color=MUTED,
        align="right",
    )
    w.gap()

    w.line("User Information", size=18, color=ACCENT)
    w.gap(0.5)
    w.line(f"Name: {user.name}", size=12)
    w.line(f"Email: {user.email}", size=12)
    w.line(f"Role: {user.role.value}", size=12)
    w.gap()

    w.line("Activity Summary", size=18, color=ACCENT)
    w.gap(0.5)
    for row in report.summary:
        w.line(f"{row.activity_type}: {row.activity_count} times", size=12)
        w.line(f"Last activity: {_fmt_ts(row.last_updated)}", size=10, color=MUTED)
        w.gap(0.5)
    w.gap()

    w.line("Recent Activities", size=18, color=ACCENT)
    w.gap(0.5)
    w.table_header()
    for index, activity in enumerate(report.recent_activities):
        w.table_row(index, (activity.activity_type, _fmt_ts(activity.activity_timestamp), activity.details or "-"))

    c.save()
    return buf.getvalue()


def generate_activity_report(db: Session, user_id: uuid.UUID) -> bytes:
    record_activity(db, user_id, ActivityType.PDF_DOWNLOAD.value, "Downloaded activity report")
    report = load_activity_report(db, user_id)
    try:
        data = render_activity_report(report)
    except Exception as exc:
        logger.exception("Rendering activity report for user %s failed", user_id)
        raise InternalError() from exc
    logger.info("Generated activity report for user %s (%d bytes)", user_id, len(data))
    return data

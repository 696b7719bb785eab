"""PDF inspection reports built with ReportLab.

Layout of one report:
    title                       display title of the record
    general information         creation date, stage, reminder interval
    room statistics             room count per type and the photo total
    one section per room        name, comment, photos with captions
    footer on every page        generation timestamp
"""

import asyncio
import io
import logging
from collections import Counter
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4
from xml.sax.saxutils import escape

from PIL import Image as PILImage
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import (
    HRFlowable,
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from rent_inspector.application.interfaces import RecordExporter
from rent_inspector.domain.entities import Record, Room

logger = logging.getLogger(__name__)

_MARGIN = 2 * cm
_MAX_PHOTO_HEIGHT = 250


class PdfRecordExporter(RecordExporter):
    """Writes ``report-<uuid4>.pdf`` files into a single export directory."""

    def __init__(self, export_dir: str | Path):
        self._export_dir = Path(export_dir)
        self._export_dir.mkdir(parents=True, exist_ok=True)
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    @property
    def export_dir(self) -> Path:
        return self._export_dir

    async def export_record(self, record: Record, photos: Mapping[str, bytes]) -> Path:
        output_path = self._export_dir / f"report-{uuid4()}.pdf"
        await asyncio.to_thread(self._build, record, photos, output_path)
        logger.info("Exported record %s to %s", record.id, output_path)
        return output_path

    def _setup_styles(self) -> None:
        self.styles.add(ParagraphStyle(
            name="ReportTitle",
            parent=self.styles["Heading1"],
            fontSize=22,
            spaceAfter=16,
        ))
        self.styles.add(ParagraphStyle(
            name="SectionTitle",
            parent=self.styles["Heading2"],
            fontSize=15,
            spaceBefore=8,
            spaceAfter=10,
        ))
        self.styles.add(ParagraphStyle(
            name="RoomTitle",
            parent=self.styles["Heading2"],
            fontSize=17,
            spaceAfter=10,
        ))
        self.styles.add(ParagraphStyle(
            name="Info",
            parent=self.styles["Normal"],
            fontSize=11,
            textColor=colors.darkgrey,
            spaceAfter=6,
        ))
        self.styles.add(ParagraphStyle(
            name="Caption",
            parent=self.styles["Normal"],
            fontSize=9,
            textColor=colors.grey,
            alignment=TA_CENTER,
            spaceAfter=12,
        ))
        self.styles.add(ParagraphStyle(
            name="NoPhotos",
            parent=self.styles["Italic"],
            fontSize=11,
            textColor=colors.grey,
            spaceAfter=12,
        ))

    def _build(self, record: Record, photos: Mapping[str, bytes], output_path: Path) -> None:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            rightMargin=_MARGIN,
            leftMargin=_MARGIN,
            topMargin=_MARGIN,
            bottomMargin=_MARGIN,
            title=record.display_title,
            author="Rent Inspector",
            creator="Rent Inspector",
        )

        story = [Paragraph(escape(record.display_title), self.styles["ReportTitle"])]
        self._add_general_info(story, record)
        self._add_room_statistics(story, record)
        story.append(self._divider())

        for index, room in enumerate(record.rooms):
            self._add_room_section(story, room, photos, doc.width)
            if index < len(record.rooms) - 1:
                story.append(self._divider())

        generated_at = datetime.now(timezone.utc)
        doc.build(
            story,
            onFirstPage=lambda canvas, d: self._draw_footer(canvas, d, generated_at),
            onLaterPages=lambda canvas, d: self._draw_footer(canvas, d, generated_at),
        )

    def _add_general_info(self, story: list, record: Record) -> None:
        lines = [
            f"<b>Created:</b> {record.created_at:%d %B %Y, %H:%M} UTC",
            f"<b>Stage:</b> {record.stage.display_name}",
        ]
        if record.reminder_interval > 0:
            lines.append(f"<b>Reminder:</b> every {record.reminder_interval} days")
        for line in lines:
            story.append(Paragraph(line, self.styles["Info"]))
        story.append(Spacer(1, 12))

    def _add_room_statistics(self, story: list, record: Record) -> None:
        story.append(Paragraph("Room statistics", self.styles["SectionTitle"]))

        counts = Counter(room.room_type for room in record.rooms)
        rows = [
            [room_type.display_name, f"x{count}"]
            for room_type, count in sorted(counts.items(), key=lambda item: item[0].display_name)
        ]
        rows.append(["Total photos", str(record.total_photos)])

        table = Table(rows, colWidths=[8 * cm, 3 * cm], hAlign="LEFT")
        table.setStyle(TableStyle([
            ("FONTSIZE", (0, 0), (-1, -1), 11),
            ("TEXTCOLOR", (0, 0), (-1, -1), colors.darkgrey),
            ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ("LINEABOVE", (0, -1), (-1, -1), 0.5, colors.lightgrey),
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]))
        story.append(table)
        story.append(Spacer(1, 16))

    def _add_room_section(
        self, story: list, room: Room, photos: Mapping[str, bytes], frame_width: float
    ) -> None:
        story.append(Paragraph(escape(room.display_name), self.styles["RoomTitle"]))
        if room.comment:
            story.append(Paragraph(f"<b>Comment:</b> {escape(room.comment)}", self.styles["Info"]))

        if not room.photo_paths:
            story.append(Paragraph("No photos", self.styles["NoPhotos"]))
            return

        story.append(Paragraph("Photos:", self.styles["Heading4"]))
        for number, token in enumerate(room.photo_paths, start=1):
            data = photos.get(token)
            if data is None:
                logger.warning("Photo %s of room %s not supplied, skipped", token, room.id)
                continue
            image = self._photo(data, frame_width - 40)
            if image is None:
                logger.warning("Photo %s of room %s is not a readable image, skipped", token, room.id)
                continue
            story.append(image)
            story.append(Paragraph(f"Photo {number}", self.styles["Caption"]))

    @staticmethod
    def _photo(data: bytes, max_width: float) -> Image | None:
        """Scale to fit ``max_width`` x 250pt, keeping the aspect ratio."""
        try:
            with PILImage.open(io.BytesIO(data)) as img:
                pixel_width, pixel_height = img.size
        except (OSError, ValueError):
            return None
        if not pixel_width or not pixel_height:
            return None

        aspect = pixel_width / pixel_height
        width, height = max_width, max_width / aspect
        if height > _MAX_PHOTO_HEIGHT:
            height = _MAX_PHOTO_HEIGHT
            width = height * aspect
        return Image(io.BytesIO(data), width=width, height=height)

    @staticmethod
    def _divider() -> HRFlowable:
        return HRFlowable(width="100%", thickness=1, color=colors.lightgrey, spaceBefore=8, spaceAfter=16)

    @staticmethod
    def _draw_footer(canvas, doc, generated_at: datetime) -> None:
        canvas.saveState()
        canvas.setFont("Helvetica", 9)
        canvas.setFillColor(colors.grey)
        canvas.drawCentredString(
            doc.pagesize[0] / 2,
            _MARGIN / 2,
            f"Generated by Rent Inspector on {generated_at:%d %b %Y, %H:%M} UTC",
        )
        canvas.restoreState()

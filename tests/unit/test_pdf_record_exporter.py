"""Unit tests for PdfRecordExporter — file naming, photo scaling and tolerant rendering."""

import io

import pytest
from PIL import Image as PILImage

from rent_inspector.domain.entities import Record, RecordStage, Room, RoomType
from rent_inspector.infrastructure.export.pdf_record_exporter import PdfRecordExporter


def _png(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    PILImage.new("RGB", (width, height), color=(200, 120, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def exporter(tmp_path) -> PdfRecordExporter:
    return PdfRecordExporter(tmp_path / "exports")


@pytest.mark.asyncio
async def test_export_writes_pdf_into_export_dir(exporter):
    record = Record(
        title="Flat 12 <move-in> & keys",
        stage=RecordStage.MOVE_IN,
        reminder_interval=30,
        rooms=[
            Room(room_type=RoomType.KITCHEN, comment="Tap drips", photo_paths=["a.png"]),
            Room(room_type=RoomType.BATHROOM, custom_name="Bathroom 1"),
        ],
    )

    path = await exporter.export_record(record, {"a.png": _png(40, 30)})

    assert path.parent == exporter.export_dir
    assert path.name.startswith("report-") and path.suffix == ".pdf"
    assert path.read_bytes().startswith(b"%PDF")


@pytest.mark.asyncio
async def test_unreadable_and_missing_photos_are_skipped(exporter):
    record = Record(
        rooms=[Room(room_type=RoomType.OTHER, photo_paths=["broken.jpg", "gone.jpg"])],
    )

    path = await exporter.export_record(record, {"broken.jpg": b"not an image"})

    assert path.read_bytes().startswith(b"%PDF")


@pytest.mark.asyncio
async def test_each_export_gets_its_own_file(exporter):
    record = Record(title="Twice")

    first = await exporter.export_record(record, {})
    second = await exporter.export_record(record, {})

    assert first != second
    assert len(list(exporter.export_dir.iterdir())) == 2


def test_wide_photo_is_scaled_to_width():
    image = PdfRecordExporter._photo(_png(400, 100), max_width=200)

    assert (image.drawWidth, image.drawHeight) == (200, 50)


def test_tall_photo_is_capped_at_250pt():
    image = PdfRecordExporter._photo(_png(100, 1000), max_width=400)

    assert image.drawHeight == 250
    assert image.drawWidth == pytest.approx(25)


def test_photo_returns_none_for_garbage():
    assert PdfRecordExporter._photo(b"\x00\x01", max_width=100) is None

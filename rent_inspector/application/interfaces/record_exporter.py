"""Port for the report-export collaborator."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

from rent_inspector.domain.entities import Record


class RecordExporter(ABC):
    """Renders one fully loaded record into a document on disk.

    Implementations never touch the store: everything they need arrives
    in ``record`` and ``photos``.
    """

    @abstractmethod
    async def export_record(self, record: Record, photos: Mapping[str, bytes]) -> Path:
        """Write the report and return where it was saved.

        ``photos`` maps each photo token of the record to its image bytes.
        Tokens missing from the mapping are left out of the report.
        """
        ...

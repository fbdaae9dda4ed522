"""Snapshot export/import documents."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from reading_tracker.exceptions import MalformedSnapshotError
from reading_tracker.models.records import SnapshotDocument

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    """Summarize pydantic errors as ``location: message`` lines."""
    lines = []
    for detail in error.errors()[:5]:
        location = ".".join(str(part) for part in detail["loc"]) or "document"
        lines.append(f"{location}: {detail['msg']}")
    if error.error_count() > 5:
        lines.append(f"... and {error.error_count() - 5} more problems")
    return "; ".join(lines)


class SnapshotService:
    """Serialize and parse full-state snapshot documents.

    Parsing never touches live state: a document is validated in full
    first and only then handed to the caller to apply.
    """

    def dumps(self, document: SnapshotDocument) -> str:
        """Serialize a snapshot document to JSON text."""
        payload = document.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(payload, indent=2, ensure_ascii=False)

    def parse(self, text: str) -> SnapshotDocument:
        """Parse and validate snapshot JSON text.

        Args:
            text: The complete document text

        Returns:
            The validated SnapshotDocument

        Raises:
            MalformedSnapshotError: If the text is not JSON or does not have
                the snapshot shape
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedSnapshotError(f"Snapshot is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedSnapshotError(
                f"Snapshot must be a JSON object, got {type(data).__name__}"
            )

        try:
            document = SnapshotDocument.model_validate(data)
        except ValidationError as e:
            raise MalformedSnapshotError(f"Snapshot has an invalid shape: {_describe(e)}") from e

        logger.info(
            f"Parsed snapshot with {len(document.books or [])} books "
            f"(exported {document.export_date or 'at unknown time'})"
        )
        return document

    def write_file(self, document: SnapshotDocument, output_path: Path) -> Path:
        """Write a snapshot document to a file.

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.dumps(document), encoding="utf-8")
        logger.info(f"Exported snapshot to {output_path}")
        return output_path

    def read_file(self, input_path: Path) -> SnapshotDocument:
        """Read and validate a snapshot file.

        Raises:
            MalformedSnapshotError: If the file cannot be read or parsed
        """
        try:
            text = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedSnapshotError(f"Cannot read snapshot {input_path}: {e}") from e
        return self.parse(text)

"""Export the buffer as a downloadable ``README.md``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from markdown_pro.runtime import telemetry

EXPORT_FILENAME = "README.md"
EXPORT_MIME_TYPE = "text/markdown"


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    filename: str
    mime_type: str
    content: bytes


def build_export(text: str) -> ExportArtifact:
    return ExportArtifact(
        filename=EXPORT_FILENAME,
        mime_type=EXPORT_MIME_TYPE,
        content=text.encode("utf-8"),
    )


def write_export(artifact: ExportArtifact, directory: Path | str) -> Path:
    """Write ``artifact`` into ``directory`` (created if missing), overwriting."""

    target_dir = Path(directory)
    with telemetry.span(
        "export::write",
        component="export",
        metadata={"directory": str(target_dir), "bytes": len(artifact.content)},
    ):
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / artifact.filename
        path.write_bytes(artifact.content)
    return path


__all__ = [
    "EXPORT_FILENAME",
    "EXPORT_MIME_TYPE",
    "ExportArtifact",
    "build_export",
    "write_export",
]

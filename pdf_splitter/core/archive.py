"""Bundle split outputs into a single zip archive."""

from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass, field

from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.splitter import SplitOutput, file_stem

# Fixed entry timestamp so identical inputs give identical archives
ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)

_COMPRESSION = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


def archive_filename(original_filename: str) -> str:
    """Name of the archive for an upload, e.g. 'report-split.zip'."""
    return f"{file_stem(original_filename)}-split.zip"


@dataclass
class Archive:
    """Ordered (name, bytes) entries that serialize to one zip file."""

    filename: str
    entries: list[tuple[str, bytes]] = field(default_factory=list, repr=False)
    config: SplitterConfig = field(default_factory=SplitterConfig, repr=False)

    def add(self, name: str, data: bytes) -> None:
        """Append an entry. Repeated names are kept as separate entries."""
        self.entries.append((name, data))

    @property
    def names(self) -> list[str]:
        """Entry names in insertion order."""
        return [name for name, _ in self.entries]

    def to_bytes(self) -> bytes:
        """Serialize all entries into a zip file."""
        compression = _COMPRESSION[self.config.compression]
        buffer = io.BytesIO()

        with zipfile.ZipFile(buffer, "w", compression) as zf:
            for name, data in self.entries:
                info = zipfile.ZipInfo(name, date_time=ENTRY_DATE_TIME)
                info.compress_type = compression
                zf.writestr(
                    info,
                    data,
                    compresslevel=(
                        self.config.compress_level
                        if compression == zipfile.ZIP_DEFLATED
                        else None
                    ),
                )

        return buffer.getvalue()


def build_archive(
    outputs: list[SplitOutput],
    original_filename: str,
    config: SplitterConfig | None = None,
) -> Archive:
    """Collect split outputs into an archive named after the upload."""
    archive = Archive(
        filename=archive_filename(original_filename),
        config=config or SplitterConfig(),
    )
    for output in outputs:
        archive.add(output.filename, output.data)
    return archive

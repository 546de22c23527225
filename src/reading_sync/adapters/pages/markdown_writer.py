"""Markdown page writer."""

from pathlib import Path

from reading_sync.core import PageWriter, ReadingList, ReadingListItem, WriteError


def render_page(item: ReadingListItem) -> str:
    """Render one reading list entry as a page with front matter."""
    lines = [
        "---",
        f'title: "{item.title}"',
        f"date: {item.date}",
        "draft: false",
        f"affiliatelink: {item.url}",
        "---",
        item.url,
        "",
    ]
    return "\n".join(lines)


class MarkdownPageWriter(PageWriter):
    """Write one markdown page per entry into a directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def write(self, reading_list: ReadingList) -> list[Path]:
        """Write all pages, overwriting files with the same name.

        Raises:
            WriteError: If the directory or any file cannot be written. The
                remaining entries are not written.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"Failed to create {self.output_dir}: {e}") from e

        written: list[Path] = []
        for item in reading_list:
            path = self.output_dir / item.filename
            try:
                path.write_text(render_page(item), encoding="utf-8")
            except (OSError, ValueError) as e:
                raise WriteError(f"Failed to write {path}: {e}", details={"title": item.title}) from e
            written.append(path)

        return written

from bisect import bisect_right
from functools import cached_property
from pathlib import Path

from swift_lint.models import ByteRange, Location, TextRange


class SourceText:
    """Immutable view over one source unit.

    Character offsets are Python string indices; byte offsets index the UTF-8 encoding that the
    syntax tree is built from.
    """

    def __init__(self, contents: str, path: str | None = None, lossless: bool = True) -> None:
        self._contents = contents
        self._path = path
        self._lossless = lossless

    @classmethod
    def from_path(cls, path: str | Path) -> "SourceText":
        file_path = Path(path)
        try:
            raw = file_path.read_bytes()
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}") from None
        try:
            return cls(raw.decode("utf-8"), str(file_path))
        except UnicodeDecodeError:
            return cls(raw.decode("utf-8", errors="replace"), str(file_path), lossless=False)

    @property
    def contents(self) -> str:
        return self._contents

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def lossless(self) -> bool:
        """False when invalid UTF-8 was replaced while reading, so the text cannot be written back."""
        return self._lossless

    @cached_property
    def data(self) -> bytes:
        return self._contents.encode("utf-8")

    @cached_property
    def _line_starts(self) -> list[int]:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self._contents) if ch == "\n")
        return starts

    def __len__(self) -> int:
        return len(self._contents)

    def substring(self, text_range: TextRange) -> str:
        return self._contents[text_range.location : text_range.end]

    def char_to_byte_offset(self, offset: int) -> int:
        return len(self._contents[:offset].encode("utf-8"))

    def char_range_to_byte_range(self, location: int, length: int) -> ByteRange | None:
        if location < 0 or length < 0 or location + length > len(self._contents):
            return None
        start = self.char_to_byte_offset(location)
        end = start + len(self._contents[location : location + length].encode("utf-8"))
        return ByteRange(location=start, length=end - start)

    def location(self, offset: int) -> Location:
        """Return the 1-based line and character of a character offset."""
        index = bisect_right(self._line_starts, offset) - 1
        return Location(file=self._path, line=index + 1, character=offset - self._line_starts[index] + 1)

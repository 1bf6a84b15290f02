import mmap
from pathlib import Path
from typing import Iterator, Union


class TextReader:
    """Memory-mapped reader for UTF-8 text corpora."""

    def __init__(self, filepath: Union[str, Path], encoding: str = "utf-8"):
        self.filepath = Path(filepath)
        self.encoding = encoding

        if not self.filepath.exists():
            raise FileNotFoundError(f"Text file not found: {self.filepath}")

        self._data_file = open(self.filepath, "rb")
        try:
            if self.filepath.stat().st_size > 0:
                self._mmapped_data = mmap.mmap(
                    self._data_file.fileno(), 0, access=mmap.ACCESS_READ
                )
            else:
                self._mmapped_data = None
        except (OSError, ValueError):
            self._data_file.close()
            raise

    def read(self) -> str:
        """Decode the whole file."""
        if self._mmapped_data is None:
            return ""
        return self._mmapped_data[:].decode(self.encoding)

    def iter_lines(self) -> Iterator[str]:
        """Yield the file line by line without trailing newlines."""
        if self._mmapped_data is None:
            return
        self._mmapped_data.seek(0)
        for raw in iter(self._mmapped_data.readline, b""):
            yield raw.decode(self.encoding).rstrip("\r\n")

    def size(self) -> int:
        """File size in bytes."""
        return 0 if self._mmapped_data is None else len(self._mmapped_data)

    def close(self) -> None:
        if self._mmapped_data is not None:
            self._mmapped_data.close()
            self._mmapped_data = None
        if not self._data_file.closed:
            self._data_file.close()

    def __enter__(self) -> "TextReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

import os
from typing import TextIO

from ps2_toolbox.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """Appends flushed batches to a .log or .txt file.

    The file is opened on the first push and kept open until the logger
    shuts down, so long sessions do not reopen it for every batch.
    """

    def __init__(self, filepath: str, create: bool = False) -> None:
        """
        Args:
            filepath (str): Target file, ending with ".txt" or ".log".
            create (bool): Create the file and its directory when missing.

        Raises:
            ValueError: If the extension is unsupported, or the file is
                missing and `create` is False.
        """
        super().__init__()

        if not filepath.endswith((".txt", ".log")):
            raise ValueError(
                f"Invalid filepath; expected string ending with '.txt' or '.log' but got {filepath}"
            )

        if create:
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            open(filepath, "a").close()
        elif not os.path.isfile(filepath):
            raise ValueError(f"Log file '{filepath}' does not exist; pass create=True")

        self.filepath = filepath
        self._file: TextIO | None = None

    async def push(self, buffer: list[str]) -> None:
        # Blocking write; the logger runs handlers on its own worker thread.
        if self._file is None:
            self._file = open(self.filepath, "a")
        self._file.write("\n".join(buffer) + "\n")
        self._file.flush()

    async def aclose(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

import logging
import os
import tempfile
import uuid
from typing import Optional


logger = logging.getLogger("storage")


class LocalStorage:
    """A client for writing episode archives to the local filesystem."""

    def __init__(self, workspace: Optional[str] = None):
        """
        Args:
            workspace (Optional[str]): Target directory. Defaults to the system temp directory.
        """
        self.workspace = workspace or tempfile.gettempdir()

    def _get_absolute_filename(self, filename: str) -> str:
        """Constructs the absolute filename in local storage.

        Args:
            filename (str): The name of the file.

        Return:
            str: The absolute filename in local storage.
        """
        return os.path.abspath(os.path.join(self.workspace, filename))

    def save_file(self, filename: str, content: bytes) -> str:
        """Saves binary content to the workspace.

        Args:
            filename (str): The name of the file to save.
            content (bytes): The content to save.

        Returns:
            str: The full path of the saved file on local filesystem.

        Raises:
            RuntimeError: If the file cannot be written.
        """
        path = self._get_absolute_filename(filename)
        try:
            os.makedirs(self.workspace, exist_ok=True)
            with open(path, "wb") as file:
                file.write(content)
        except OSError as e:
            raise RuntimeError(f"Error saving file to local storage: {e}") from e
        return path

    def save_archive(self, data: Optional[bytes]) -> str:
        """Writes an archive under a fresh unique name.

        Args:
            data (Optional[bytes]): ZIP file content.

        Returns:
            str: Path of the written archive, or an empty string when there is nothing to write.
        """
        if not data:
            return ""
        path = self.save_file(f"{uuid.uuid4()}.zip", data)
        logger.info(f"Archive written to {path} ({len(data)} bytes)")
        return path

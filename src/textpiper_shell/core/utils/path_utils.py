# src/textpiper_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

HISTORY_FILE_NAME = ".textpiper_shell_history"


class PathUtils:
    """
    Where TextPiper reads and writes: the installed shell package (settings.json
    and handlers), the user's history file and the export folder.
    """

    @staticmethod
    def get_shell_package_root() -> Path:
        # core/utils/path_utils.py -> textpiper_shell/
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_handlers_dir() -> Path:
        return PathUtils.get_shell_package_root() / "core" / "handlers"

    @staticmethod
    def get_shell_history_file() -> Path:
        return Path.home() / HISTORY_FILE_NAME

    @staticmethod
    def get_user_documents_dir() -> Path:
        """Default export folder (~/Documents)."""
        return Path.home() / "Documents"

    @staticmethod
    def resolve_output_path(output: str, default_suffix: str) -> Path:
        """
        Turns an export target into a file path. Relative paths are placed in
        the Documents folder and a name without a suffix gets `default_suffix`,
        so 'draft' becomes ~/Documents/draft.json for a JSON export.
        """
        path = Path(output).expanduser()
        if not path.is_absolute():
            path = PathUtils.get_user_documents_dir() / path
        if not path.suffix:
            path = path.with_suffix(default_suffix)
        logger.debug("Export target resolved to %s", path)
        return path

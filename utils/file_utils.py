"""
File Utilities Module
Common file operations and path handling functions.
"""

from pathlib import Path
from typing import Optional

NODE_MODULES_DIR = 'node_modules'

def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()

def find_node_modules(project_root: Optional[str | Path]) -> Optional[Path]:
    """
    Locate the node_modules directory of a project.

    Args:
        project_root: Root folder of the workspace, or None when no folder is open

    Returns:
        Path to <project_root>/node_modules, or None without a project root
    """
    if not project_root:
        return None
    return normalize_path(project_root) / NODE_MODULES_DIR

def read_file_content(file_path: Path) -> str:
    """
    Safely read file content with proper encoding.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()

import os
import sys
from typing import Optional, TextIO

from ..exceptions.tile_list_exceptions import OutputError


class FileUtils:
    """Utility class for file operations"""
    
    @staticmethod
    def get_tile_path(directory: str, zoom: int, x: int, y: int, suffix: str) -> str:
        """Generate tile file path"""
        relative = f"{zoom}/{x}/{y}{suffix}"
        if not directory:
            return relative
        return f"{directory.rstrip('/')}/{relative}"
    
    @staticmethod
    def file_exists(file_path: str) -> bool:
        """Check if file exists"""
        return os.path.exists(file_path)
    
    @staticmethod
    def open_output(path: Optional[str]) -> TextIO:
        """Open the output destination, standard output if no path is given"""
        if not path:
            return sys.stdout
        try:
            return open(path, 'w', encoding='utf-8', newline='')
        except OSError as e:
            raise OutputError(f"Failed to open output file {path}: {e}")
    
    @staticmethod
    def close_output(stream: TextIO) -> None:
        """Close the output destination unless it is standard output"""
        if stream is sys.stdout:
            stream.flush()
            return
        try:
            stream.close()
        except OSError as e:
            raise OutputError(f"Closing output file failed: {e}")

import os
import logging
from datetime import datetime
from typing import Dict


class FileInspector:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def describe(self, filepath: str) -> Dict:
        """
        Report file metadata. A missing file gives size 0 and 'N/A' for the
        modification time instead of an error.
        """
        info = {
            'path': os.path.abspath(filepath),
            'exists': os.path.exists(filepath),
            'readable': False,
            'writable': False,
            'size': 0,
            'last_modified': 'N/A'
        }

        if not info['exists']:
            return info

        try:
            info['readable'] = os.access(filepath, os.R_OK)
            info['writable'] = os.access(filepath, os.W_OK)
            stat = os.stat(filepath)
            info['size'] = stat.st_size
            info['last_modified'] = datetime.fromtimestamp(stat.st_mtime).strftime('%Y-%m-%d %H:%M:%S')
        except OSError as e:
            self.logger.error(f"Error reading file attributes: {str(e)}")

        return info

    def format_description(self, info: Dict) -> str:
        return "\n".join([
            f"File: {info['path']}",
            f"Exists: {info['exists']}",
            f"Readable: {info['readable']}",
            f"Writable: {info['writable']}",
            f"Size(bytes): {info['size']}",
            f"Last Modified: {info['last_modified']}"
        ])

    def read_range(self, filepath: str, offset: int, length: int) -> str:
        """
        Read up to `length` raw bytes starting at `offset` and decode them as UTF-8.
        The offset is clamped into [0, size] and the length to what remains,
        so the read never passes end of file. Multi-byte characters cut at
        either end come back as replacement characters.
        """
        if not os.path.exists(filepath):
            return ""

        try:
            with open(filepath, 'rb') as f:
                size = os.fstat(f.fileno()).st_size
                position = min(max(offset, 0), size)
                count = max(0, min(length, size - position))

                f.seek(position)
                data = f.read(count)

            return data.decode('utf-8', errors='replace')

        except OSError as e:
            self.logger.error(f"Error reading byte range from {filepath}: {str(e)}")
            return ""

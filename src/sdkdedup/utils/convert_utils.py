"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""

BYTES_PER_MB = 1024.0 * 1024.0


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0.00B"

        size = float(size_bytes)
        for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
            if size < 1024:
                return f"{size:.2f}{unit}"
            size /= 1024
        return f"{size:.2f}EB"

    @staticmethod
    def bytes_to_mb(size_bytes: int) -> str:
        """
        Megabytes with exactly two decimals, as printed in the summary line.
        """
        return f"{max(size_bytes, 0) / BYTES_PER_MB:.2f}"

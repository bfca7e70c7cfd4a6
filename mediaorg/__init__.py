"""
Mediaorg - Photo and video library organization tool.

Organizes media files by:
- Reading capture dates and camera serial numbers with exiftool
- Renaming files with a timestamp, serial and checksum prefix
- Placing them into a year/month directory tree
- Archiving directories into checksummed backups
"""

__version__ = "0.3.0"

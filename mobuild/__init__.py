"""Source layout, download URLs and a threaded downloader for Mod Organizer's dependencies."""

__version__ = "0.1.0"
"""Native backend of the VDI image viewer shell."""

__version__ = "1.0.0"

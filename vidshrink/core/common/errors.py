# File: vidshrink/core/common/errors.py


class ShrinkError(Exception):
    """Base class for every failure the CLI reports to the user."""


class InvalidSizeArgument(ShrinkError, ValueError):
    """Target size is not one of the allowed megabyte values."""


class ProbeError(ShrinkError, RuntimeError):
    """ffprobe failed or returned a duration we cannot use."""


class EncodeError(ShrinkError, RuntimeError):
    """ffmpeg failed while re-encoding."""

"""Math utilities namespace."""

from .scaling import scale_down, scale_up  # noqa: F401

# File: vidshrink/core/common/enums.py

from enum import Enum, unique
from .errors import InvalidSizeArgument

BYTES_PER_MB = 1024 * 1024

@unique
class TargetSize(int, Enum):
    MB_50 = 50
    MB_100 = 100

    @classmethod
    def from_megabytes(cls, megabytes: int) -> "TargetSize":
        try:
            return cls(megabytes)
        except ValueError as e:
            allowed = " or ".join(str(size.value) for size in cls)
            raise InvalidSizeArgument(f"Target size must be either {allowed} MB, got {megabytes}.") from e

    @property
    def megabytes(self) -> int:
        return self.value

    def to_bytes(self) -> int:
        return self.value * BYTES_PER_MB

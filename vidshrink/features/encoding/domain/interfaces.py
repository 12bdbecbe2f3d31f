from abc import ABC, abstractmethod
from .models import EncodeJob

class IEncoder(ABC):
    """
    Contract for the re-encoding engine.
    Abstracts away the underlying tool (FFmpeg) from the business logic.
    """

    @abstractmethod
    def encode(self, job: EncodeJob) -> None:
        """
        Re-encodes the source video at the requested video bitrate,
        overwriting the output file if it exists.

        Args:
            job: The EncodeJob entity containing source, output, and bitrate.

        Raises:
            EncodeError: If the underlying encoding process fails.
        """
        pass

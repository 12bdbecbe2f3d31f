from abc import ABC, abstractmethod
from vidshrink.core.shared_types import MediaFile

class IDurationProbe(ABC):
    """
    Contract for reading the playback length of a media file.
    Abstracts away the underlying tool (ffprobe).
    """

    @abstractmethod
    def get_duration(self, media: MediaFile) -> float:
        """
        Returns the duration of the media in seconds.

        Raises:
            ProbeError: If the tool fails or the duration is unusable.
        """
        pass

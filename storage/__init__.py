from storage.db import EpisodeTable

__all__ = ["EpisodeTable"]

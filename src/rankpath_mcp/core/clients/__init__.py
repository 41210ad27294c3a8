from .rankpath import API_BASE, DEFAULT_TIMEOUT, RankPathClient

__all__ = ["API_BASE", "DEFAULT_TIMEOUT", "RankPathClient"]

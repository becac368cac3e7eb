from .figma_client import FigmaClient, FigmaClientError

__all__ = ["FigmaClient", "FigmaClientError"]

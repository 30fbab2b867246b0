# verdant/pipeline/__init__.py
from .pipeline import CompressionPipeline, CompressionResult, compress_documents

__all__ = ["CompressionPipeline", "CompressionResult", "compress_documents"]

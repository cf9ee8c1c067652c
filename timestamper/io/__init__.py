# timestamper/io/__init__.py
from .reader import SequenceReader, TimestampsFileReader
from .writer import TimestampsFileWriter

__all__ = ["SequenceReader", "TimestampsFileReader", "TimestampsFileWriter"]

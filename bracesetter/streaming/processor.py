"""
Incremental processing of streamed generator output.

Generators deliver their answer in chunks, and a live preview wants a
well-formed document after every chunk. StreamingProcessor accumulates the
chunks and re-runs a processor over everything received so far; the repair
steps make each partial snapshot structurally valid.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional

from ..preprocessing.pipeline import CodeProcessor

logger = logging.getLogger(__name__)


class StreamingProcessor:
    """Accumulates streamed chunks and repairs the text received so far.

    One instance serves one stream. The wrapped processor may be shared.
    """

    def __init__(self, processor: CodeProcessor):
        self.processor = processor
        self._chunks: list[str] = []
        self._chunk_count = 0

    @property
    def text(self) -> str:
        """Raw text received so far."""
        return "".join(self._chunks)

    @property
    def chunk_count(self) -> int:
        return self._chunk_count

    def feed(self, chunk: Optional[str]) -> str:
        """Append a chunk and return the processed snapshot."""
        if chunk:
            self._chunks.append(chunk)
            self._chunk_count += 1
        return self.snapshot()

    def snapshot(self) -> str:
        """Process the text received so far."""
        raw = self.text
        processed = self.processor.process(raw)
        logger.debug(
            f"Snapshot after {self._chunk_count} chunk(s): "
            f"{len(raw)} raw -> {len(processed or '')} processed chars"
        )
        return processed

    def finish(self) -> str:
        """Process the complete text once the stream has ended."""
        return self.snapshot()

    def reset(self) -> None:
        """Discard everything received so far."""
        self._chunks.clear()
        self._chunk_count = 0

    def iter_snapshots(self, chunks: Iterable[Optional[str]]) -> Iterator[str]:
        """Feed each chunk in turn, yielding the snapshot after each."""
        for chunk in chunks:
            yield self.feed(chunk)

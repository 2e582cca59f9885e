"""
Incremental reader for the relayed AI event stream.

Bytes arrive in arbitrary chunks. They are decoded as UTF-8 (partial multibyte
sequences are held until the next chunk), assembled into lines and turned into
text deltas taken from `choices[0].delta.content` of each `data: ` payload.
"""

import codecs
import enum
import json
import logging
from typing import AsyncIterable, Callable, List, Optional

from pydantic import ValidationError

from schemas import StreamChunk

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"

# returned by parse_event_line for the terminal line
END_OF_STREAM = object()


class LineState(str, enum.Enum):
    AWAITING_MORE_BYTES = "awaiting_more_bytes"
    HAVE_COMPLETE_LINE = "have_complete_line"


class _Incomplete(Exception):
    """The payload on a complete line is not valid JSON yet."""


def parse_event_line(line: str):
    """
    Interpret one SSE line.

    Returns:
        END_OF_STREAM for the terminal line, the delta text for a content-bearing
        payload, or None for lines that carry nothing (comments, other fields,
        chunks without content)

    Raises:
        _Incomplete: the payload is not parseable JSON
    """
    if line.endswith("\r"):
        line = line[:-1]
    if not line or line.startswith(":"):
        return None
    if not line.startswith(DATA_PREFIX):
        return None

    payload = line[len(DATA_PREFIX):].strip()
    if payload == DONE_SENTINEL:
        return END_OF_STREAM

    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        raise _Incomplete(payload)

    try:
        chunk = StreamChunk.model_validate(data)
    except ValidationError:
        logger.debug(f"Ignoring chunk with unexpected shape: {payload[:80]}")
        return None
    return chunk.delta_text()


class StreamConsumer:
    """
    Turns relayed bytes into assistant text.

    `on_update` receives the full assistant content so far each time a delta arrives.
    """

    def __init__(self, on_update: Optional[Callable[[str], None]] = None):
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self.state = LineState.AWAITING_MORE_BYTES
        self.content = ""
        self.done = False
        self._on_update = on_update

    def _append(self, delta: str) -> str:
        self.content += delta
        if self._on_update:
            self._on_update(self.content)
        return delta

    def _next_line(self) -> Optional[str]:
        if "\n" not in self._buffer:
            self.state = LineState.AWAITING_MORE_BYTES
            return None
        self.state = LineState.HAVE_COMPLETE_LINE
        line, self._buffer = self._buffer.split("\n", 1)
        return line

    def _process_lines(self) -> List[str]:
        deltas = []
        while not self.done:
            line = self._next_line()
            if line is None:
                break
            try:
                result = parse_event_line(line)
            except _Incomplete:
                # keep the line in front and wait for more bytes
                self._buffer = line + "\n" + self._buffer
                self.state = LineState.AWAITING_MORE_BYTES
                break
            if result is END_OF_STREAM:
                self.done = True
                break
            if result:
                deltas.append(self._append(result))
        return deltas

    def feed(self, chunk: bytes) -> List[str]:
        """Consume one chunk of bytes and return the deltas it completed."""
        if self.done:
            return []
        self._buffer += self._decoder.decode(chunk)
        return self._process_lines()

    def finish(self) -> List[str]:
        """
        Flush the remaining buffer after the stream closed.

        Lines that still fail to parse are dropped, no more data can complete them.
        """
        if self.done:
            return []
        self._buffer += self._decoder.decode(b"", final=True)
        remaining, self._buffer = self._buffer, ""
        self.state = LineState.AWAITING_MORE_BYTES

        deltas = []
        for line in remaining.split("\n"):
            try:
                result = parse_event_line(line)
            except _Incomplete as e:
                logger.debug(f"Dropping unparsable line after stream close: {str(e)[:80]}")
                continue
            if result is END_OF_STREAM:
                self.done = True
                break
            if result:
                deltas.append(self._append(result))
        return deltas


async def consume_stream(chunks: AsyncIterable[bytes], on_update: Optional[Callable[[str], None]] = None) -> str:
    """
    Read a whole relayed stream and return the final assistant content.

    Stops reading once the [DONE] sentinel has been seen.
    """
    consumer = StreamConsumer(on_update)
    async for chunk in chunks:
        consumer.feed(chunk)
        if consumer.done:
            break
    consumer.finish()
    return consumer.content

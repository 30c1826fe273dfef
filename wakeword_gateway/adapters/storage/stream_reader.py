"""
Blocking file-like view over an async byte stream.
Lets boto3 consume a request body from a worker thread without buffering it.
"""
from typing import AsyncIterator, Optional

import anyio.from_thread


class AsyncStreamReader:
    """
    Non-seekable, read-only file object fed by an async iterator.

    Must be read from a thread started with ``anyio.to_thread.run_sync``;
    each refill hops back to the event loop for the next chunk.
    """

    def __init__(self, chunks: Optional[AsyncIterator[bytes]]):
        self._chunks = chunks.__aiter__() if chunks is not None else None
        self._buffer = bytearray()
        self._exhausted = chunks is None
        self.bytes_read = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    async def _next_chunk(self) -> Optional[bytes]:
        try:
            return await self._chunks.__anext__()
        except StopAsyncIteration:
            return None

    def _fill(self, size: int) -> None:
        while not self._exhausted and (size < 0 or len(self._buffer) < size):
            chunk = anyio.from_thread.run(self._next_chunk)
            if chunk is None:
                self._exhausted = True
            elif chunk:
                self._buffer.extend(chunk)

    def read(self, size: Optional[int] = -1) -> bytes:
        if size is None:
            size = -1
        self._fill(size)
        if size < 0:
            data = bytes(self._buffer)
            self._buffer.clear()
        else:
            data = bytes(self._buffer[:size])
            del self._buffer[:size]
        self.bytes_read += len(data)
        return data

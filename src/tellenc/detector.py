"""EncodingDetector: streaming encoding detection."""

from __future__ import annotations

from collections.abc import Mapping

from tellenc._utils import DEFAULT_MAX_BYTES, _as_bytes, _validate_max_bytes
from tellenc.pipeline import DetectionResult
from tellenc.pipeline.bom import detect_bom
from tellenc.pipeline.orchestrator import run_pipeline

_NONE_RESULT = DetectionResult(encoding=None)


class EncodingDetector:
    """Streaming character encoding detector.

    Implements a feed/close pattern: chunks are buffered until
    :meth:`close`, which runs the same pipeline as :func:`tellenc.tellenc`
    on the first *max_bytes* bytes fed.
    """

    def __init__(
        self,
        max_bytes: int = DEFAULT_MAX_BYTES,
        frequency_table: Mapping[int, str] | None = None,
    ) -> None:
        """Initialize the detector.

        :param max_bytes: Maximum number of bytes to buffer from
            :meth:`feed` calls before stopping accumulation.
        :param frequency_table: Optional ``dbyte -> encoding`` mapping
            passed through to the decision cascade.
        """
        _validate_max_bytes(max_bytes)
        self._max_bytes = max_bytes
        self._frequency_table = frequency_table
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result: DetectionResult | None = None

    def feed(self, byte_str: bytes | bytearray) -> None:
        """Feed a chunk of bytes to the detector.

        :param byte_str: The next chunk of bytes to examine.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        chunk = _as_bytes(byte_str)
        if self._done:
            return
        remaining = self._max_bytes - len(self._buffer)
        self._buffer.extend(chunk[:remaining])
        if len(self._buffer) >= self._max_bytes:
            self._done = True
        elif detect_bom(bytes(self._buffer[:5])) is not None:
            # A BOM decides the result no matter what follows.
            self._done = True

    def close(self) -> dict[str, str | None]:
        """Finalize detection and return the result.

        :returns: A dictionary with the key ``"encoding"``.
        """
        if not self._closed:
            self._closed = True
            self._result = run_pipeline(
                bytes(self._buffer),
                max_bytes=self._max_bytes,
                frequency_table=self._frequency_table,
            )
            self._done = True
        return self.result

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result = None

    @property
    def done(self) -> bool:
        """Whether detection is complete and no more data is needed."""
        return self._done

    @property
    def result(self) -> dict[str, str | None]:
        """The detection result, ``{"encoding": None}`` before :meth:`close`."""
        if self._result is not None:
            return self._result.to_dict()
        return _NONE_RESULT.to_dict()

    @property
    def detection(self) -> DetectionResult | None:
        """The full :class:`DetectionResult` once :meth:`close` has run."""
        return self._result

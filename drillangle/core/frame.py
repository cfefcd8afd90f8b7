"""Raw camera frame buffers."""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np


class FrameFormatError(ValueError):
    """Raised when a pixel buffer does not describe a valid BGR frame."""


@dataclass(frozen=True)
class RawFrame:
    """A 3-channel, 8-bit BGR pixel buffer with explicit geometry.

    Rows may carry padding, so `stride` (bytes per row) can exceed
    ``width * 3``.

    Attributes:
        buffer: Bytes-like pixel data, at least ``stride * height`` long.
        width: Frame width in pixels.
        height: Frame height in pixels.
        stride: Bytes per row. Defaults to ``width * 3``.
    """

    buffer: Union[bytes, bytearray, memoryview]
    width: int
    height: int
    stride: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise FrameFormatError(
                f"Frame dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.stride is None:
            object.__setattr__(self, "stride", self.width * 3)
        if self.stride < self.width * 3:
            raise FrameFormatError(
                f"Stride {self.stride} is smaller than width * 3 ({self.width * 3})"
            )
        size = memoryview(self.buffer).nbytes
        if size < self.stride * self.height:
            raise FrameFormatError(
                f"Buffer holds {size} bytes, expected at least {self.stride * self.height}"
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RawFrame":
        """Wrap a copy of an (H, W, 3) uint8 BGR image."""
        array = as_bgr_array(array)
        height, width = array.shape[:2]
        return cls(np.ascontiguousarray(array).tobytes(), width, height)

    def to_array(self) -> np.ndarray:
        """Return an (H, W, 3) uint8 view of the buffer without row padding."""
        data = np.frombuffer(self.buffer, dtype=np.uint8, count=self.stride * self.height)
        rows = data.reshape(self.height, self.stride)
        return rows[:, : self.width * 3].reshape(self.height, self.width, 3)


def as_bgr_array(frame) -> np.ndarray:
    """Return `frame` as an (H, W, 3) uint8 array.

    Args:
        frame: A RawFrame or a numpy BGR image.

    Returns:
        Array view of the frame (not a copy).

    Raises:
        FrameFormatError: If the frame is missing or malformed.
    """
    if frame is None:
        raise FrameFormatError("No frame supplied")
    if isinstance(frame, RawFrame):
        return frame.to_array()
    if not isinstance(frame, np.ndarray):
        raise FrameFormatError(f"Unsupported frame type: {type(frame).__name__}")
    if frame.dtype != np.uint8 or frame.ndim != 3 or frame.shape[2] != 3:
        raise FrameFormatError(
            f"Expected (H, W, 3) uint8 image, got {frame.shape} {frame.dtype}"
        )
    if frame.shape[0] == 0 or frame.shape[1] == 0:
        raise FrameFormatError(f"Empty frame: {frame.shape}")
    return frame

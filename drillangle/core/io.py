"""Frame sources, sinks and codecs."""

from pathlib import Path
from typing import Iterator, Tuple

import cv2
import numpy as np
from PIL import Image

from .frame import FrameFormatError


VIDEO_EXTENSIONS = {".mp4", ".avi", ".mov", ".mkv"}
IMAGE_EXTENSIONS = {".bmp", ".png", ".jpg", ".jpeg", ".tif", ".tiff"}


def is_video_file(filename: str) -> bool:
    """Check if filename has a video extension.

    Args:
        filename: Path to file.

    Returns:
        True if file has a video extension.
    """
    return Path(filename).suffix.lower() in VIDEO_EXTENSIONS


def is_image_file(filename: str) -> bool:
    """Check if filename has an image extension the encoder can write."""
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


def encode_frame(image: np.ndarray, ext: str = ".bmp") -> bytes:
    """Encode a BGR image into an image file format.

    Args:
        image: BGR numpy array.
        ext: Target format extension, e.g. ".bmp" or ".png".

    Returns:
        Encoded bytes.

    Raises:
        FrameFormatError: If OpenCV cannot encode the image.
    """
    try:
        ok, encoded = cv2.imencode(ext, image)
    except cv2.error as e:
        raise FrameFormatError(f"Cannot encode frame as {ext}: {e}") from e
    if not ok:
        raise FrameFormatError(f"Cannot encode frame as {ext}")
    return encoded.tobytes()


def save_image(path: str, image: np.ndarray):
    """Encode a BGR image in the format given by the file extension and write it.

    Raises:
        FrameFormatError: If the extension is not a supported image format.
    """
    suffix = Path(path).suffix.lower()
    if suffix not in IMAGE_EXTENSIONS:
        raise FrameFormatError(f"Unsupported image format: {suffix or path}")
    Path(path).write_bytes(encode_frame(image, suffix))


class FrameReader:
    """Read BGR frames from an image, a video file or a camera."""

    def __init__(self, source: str, camera: bool = False):
        """Initialize the reader.

        Args:
            source: Path to video or image file, or a camera index when
                `camera` is set.
            camera: Treat `source` as an OpenCV device index.
        """
        self.source = source
        self.is_camera = camera
        self.is_video = camera or is_video_file(source)
        self._cap = None
        self._image = None
        self._fps = 15
        self._frame_count = 1

        if self.is_camera:
            self._cap = cv2.VideoCapture(int(source))
            if not self._cap.isOpened():
                raise IOError(f"Cannot open camera: {source}")
            self._fps = self._cap.get(cv2.CAP_PROP_FPS) or self._fps
            self._frame_count = 0
        elif self.is_video:
            self._cap = cv2.VideoCapture(source)
            if not self._cap.isOpened():
                raise IOError(f"Cannot open video file: {source}")
            self._fps = self._cap.get(cv2.CAP_PROP_FPS) or self._fps
            self._frame_count = int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT))
        else:
            rgb = np.array(Image.open(source).convert("RGB"))
            self._image = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)

    @property
    def fps(self) -> float:
        """Get frames per second."""
        return self._fps

    @property
    def frame_count(self) -> int:
        """Get total frame count (1 for images, 0 when unknown)."""
        return self._frame_count

    def read_frame(self) -> Tuple[bool, np.ndarray | None]:
        """Read the next frame.

        Returns:
            Tuple of (success, frame). Frame is BGR numpy array.
        """
        if self.is_video:
            return self._cap.read()
        if self._image is not None:
            img = self._image
            self._image = None  # Only return once
            return True, img
        return False, None

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate over frames."""
        while True:
            ret, frame = self.read_frame()
            if not ret:
                break
            yield frame

    def close(self):
        """Release resources."""
        if self._cap is not None:
            self._cap.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class FrameWriter:
    """Write BGR frames to a video file."""

    def __init__(self, path: str, width: int, height: int, fps: float = 15.0):
        """Initialize the writer.

        Args:
            path: Output video path.
            width: Frame width.
            height: Frame height.
            fps: Frames per second.
        """
        self.path = path
        self.width = width
        self.height = height
        self.fps = fps

        fourcc = cv2.VideoWriter_fourcc(*"mp4v")
        self._writer = cv2.VideoWriter(path, fourcc, fps, (width, height))
        if not self._writer.isOpened():
            raise IOError(f"Cannot create video writer: {path}")

    def write_frame(self, frame: np.ndarray):
        """Write a BGR frame to the video."""
        self._writer.write(frame)

    def close(self):
        """Release resources."""
        self._writer.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

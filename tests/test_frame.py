import numpy as np
import pytest

from drillangle.core.frame import FrameFormatError, RawFrame, as_bgr_array


def test_raw_frame_default_stride():
    frame = RawFrame(bytes(4 * 2 * 3), width=4, height=2)
    assert frame.stride == 12
    assert frame.to_array().shape == (2, 4, 3)


def test_raw_frame_skips_row_padding():
    width, height, stride = 2, 2, 8
    buffer = bytearray(stride * height)
    buffer[0:6] = bytes([1, 2, 3, 4, 5, 6])
    buffer[6:8] = bytes([99, 99])  # padding
    buffer[8:14] = bytes([7, 8, 9, 10, 11, 12])

    array = RawFrame(buffer, width, height, stride).to_array()

    assert array.tolist() == [
        [[1, 2, 3], [4, 5, 6]],
        [[7, 8, 9], [10, 11, 12]],
    ]


def test_raw_frame_rejects_small_stride():
    with pytest.raises(FrameFormatError):
        RawFrame(bytes(100), width=10, height=2, stride=20)


def test_raw_frame_rejects_short_buffer():
    with pytest.raises(FrameFormatError):
        RawFrame(bytes(59), width=10, height=2)


def test_raw_frame_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        RawFrame(b"", width=0, height=0)


def test_raw_frame_from_array_copies():
    image = np.arange(2 * 3 * 3, dtype=np.uint8).reshape(2, 3, 3)
    frame = RawFrame.from_array(image)
    image[0, 0, 0] = 200

    assert frame.width == 3 and frame.height == 2
    assert frame.to_array()[0, 0, 0] == 0


@pytest.mark.parametrize(
    "bad",
    [
        None,
        "not a frame",
        np.zeros((4, 4), np.uint8),
        np.zeros((4, 4, 4), np.uint8),
        np.zeros((4, 4, 3), np.float32),
        np.zeros((0, 4, 3), np.uint8),
    ],
)
def test_as_bgr_array_rejects_malformed(bad):
    with pytest.raises(FrameFormatError):
        as_bgr_array(bad)

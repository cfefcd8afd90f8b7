"""Headless batch measuring runner."""

from typing import List, Optional

import numpy as np
from tqdm import tqdm

from ..config import RunConfig
from ..core.io import FrameReader, FrameWriter, save_image
from ..detection.base import Detection
from ..detection.pipeline import AngleDetector


def describe(index: int, detection: Detection) -> str:
    """One-line report for a processed frame."""
    if detection.found:
        return f"frame {index}: angle {detection.angle:.1f}"
    result = detection.result
    detail = f": {result.message}" if result.message else ""
    return f"frame {index}: not found ({result.reason}{detail})"


def summarize(detections: List[Detection]) -> str:
    """Summary line over all processed frames."""
    angles = [d.angle for d in detections if d.found]
    summary = f"Processed {len(detections)} frame(s), angle found in {len(angles)}"
    if angles:
        summary += f", mean angle {np.mean(angles):.1f}"
    return summary


def run_headless(config: RunConfig) -> List[Detection]:
    """Measure every frame of the input and optionally write annotated output.

    Image inputs are written back as an image; video and camera inputs
    as a video.

    Args:
        config: Run configuration.

    Returns:
        Detections in frame order.

    Raises:
        IOError: If the input or output cannot be opened.
    """
    detector = AngleDetector(config.detector)
    detections: List[Detection] = []
    writer: Optional[FrameWriter] = None

    with FrameReader(config.input_path, camera=config.camera) as reader:
        total = reader.frame_count or None
        if config.max_frames is not None:
            total = min(total, config.max_frames) if total else config.max_frames

        progress = tqdm(total=total, desc="Measuring", disable=not reader.is_video)
        try:
            for index, frame in enumerate(reader):
                if config.max_frames is not None and index >= config.max_frames:
                    break

                detection = detector.detect(frame)
                detections.append(detection)
                tqdm.write(describe(index, detection))

                if config.output_path:
                    if not reader.is_video:
                        save_image(config.output_path, detection.annotated)
                    else:
                        if writer is None:
                            height, width = detection.annotated.shape[:2]
                            writer = FrameWriter(config.output_path, width, height, reader.fps)
                        writer.write_frame(detection.annotated)
                progress.update(1)
        finally:
            progress.close()
            if writer is not None:
                writer.close()

    print(summarize(detections))
    if config.output_path and detections:
        print(f"Output saved to: {config.output_path}")
    return detections

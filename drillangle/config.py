"""Configuration dataclasses for drillangle."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class RenderConfig:
    """Styling of the operator overlay (BGR colours)."""

    contour_color: Color = (0, 255, 0)
    contour_thickness: int = 2
    vertex_color: Color = (0, 0, 255)
    vertex_radius: int = 5
    label_color: Color = (255, 0, 0)
    label_origin: Tuple[int, int] = (20, 50)
    label_scale: float = 1.5
    label_thickness: int = 3
    label_format: str = "Angle: {angle:.1f}"


@dataclass(frozen=True)
class DetectorConfig:
    """Constants of the angle detection pipeline.

    Instances are immutable and may be shared between threads.
    """

    blur_kernel: Tuple[int, int] = (5, 5)
    blur_sigma: float = 1.5
    adaptive_block_size: int = 21
    adaptive_offset: float = 5.0
    canny_low: float = 50.0
    canny_ratio: float = 3.0
    epsilon_factor: float = 0.02
    min_vertex_distance: float = 20.0
    filter_vertex_count: int = 4
    render: RenderConfig = field(default_factory=RenderConfig)

    @property
    def canny_high(self) -> float:
        """Upper hysteresis threshold for edge detection."""
        return self.canny_low * self.canny_ratio


@dataclass
class RunConfig:
    """Combined configuration for a measuring run."""

    input_path: str
    output_path: Optional[str]
    detector: DetectorConfig
    camera: bool = False
    max_frames: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_args(
        cls,
        input_path: str,
        output_path: Optional[str] = None,
        camera: bool = False,
        max_frames: Optional[int] = None,
        verbose: bool = False,
        # Detector config
        blur_sigma: float = 1.5,
        block_size: int = 21,
        offset: float = 5.0,
        canny_low: float = 50.0,
        epsilon_factor: float = 0.02,
        min_vertex_distance: float = 20.0,
    ) -> "RunConfig":
        """Create RunConfig from CLI arguments."""
        return cls(
            input_path=input_path,
            output_path=output_path,
            detector=DetectorConfig(
                blur_sigma=blur_sigma,
                adaptive_block_size=block_size,
                adaptive_offset=offset,
                canny_low=canny_low,
                epsilon_factor=epsilon_factor,
                min_vertex_distance=min_vertex_distance,
            ),
            camera=camera,
            max_frames=max_frames,
            verbose=verbose,
        )

"""cloud_layout package."""

from .api import PlacedTag, TagCloud, build_tag_cloud, render_tag_cloud, write_summary
from .config import LayoutConfig, build_layouter, load_layout_config
from .geometry import Point, Rectangle, Size
from .placer import CircularCloudLayouter, InvalidSizeError, PointSourceExhaustedError
from .spiral import ArchimedesSpiral, IterablePointSource, PointGenerator, SquareSpiral
from .text_rendering import EstimatedTextMeasurer, PillowTextMeasurer, get_text_measurer
from .words import count_words, font_size_for, top_words

__all__ = [
	"Point",
	"Size",
	"Rectangle",
	"PointGenerator",
	"ArchimedesSpiral",
	"SquareSpiral",
	"IterablePointSource",
	"CircularCloudLayouter",
	"InvalidSizeError",
	"PointSourceExhaustedError",
	"LayoutConfig",
	"load_layout_config",
	"build_layouter",
	"count_words",
	"top_words",
	"font_size_for",
	"PillowTextMeasurer",
	"EstimatedTextMeasurer",
	"get_text_measurer",
	"PlacedTag",
	"TagCloud",
	"build_tag_cloud",
	"render_tag_cloud",
	"write_summary",
]
__version__ = "0.1.0"

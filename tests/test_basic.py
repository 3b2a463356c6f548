import itertools
import math
import random

import pytest

from cloud_layout import (
    ArchimedesSpiral,
    CircularCloudLayouter,
    InvalidSizeError,
    IterablePointSource,
    Point,
    PointGenerator,
    PointSourceExhaustedError,
    Rectangle,
    Size,
    SquareSpiral,
)


def _layouter(center: Point = Point(0, 0)) -> CircularCloudLayouter:
    return CircularCloudLayouter(center, ArchimedesSpiral(center))


def _assert_no_overlaps(rects) -> None:
    for first, second in itertools.combinations(rects, 2):
        assert not first.intersects(second), f"{first} overlaps {second}"


def test_rectangles_sharing_an_edge_do_not_intersect() -> None:
    a = Rectangle(Point(0, 0), Size(10, 10))
    assert not a.intersects(Rectangle(Point(10, 0), Size(5, 5)))
    assert not a.intersects(Rectangle(Point(10, 10), Size(5, 5)))
    assert a.intersects(Rectangle(Point(9, 9), Size(5, 5)))
    assert a.intersects(Rectangle(Point(2, 2), Size(1, 1)))


def test_centered_rectangle_reports_requested_center() -> None:
    for size in (Size(12, 34), Size(5, 5), Size(1, 1), Size(7, 2)):
        rect = Rectangle.centered_at(Point(-3, 8), size)
        assert rect.center == Point(-3, 8)
        assert rect.size == size


def test_points_on_same_row_or_column() -> None:
    assert Point(3, 4).is_on_same_axis_with(Point(3, -9))
    assert Point(3, 4).is_on_same_axis_with(Point(-1, 4))
    assert not Point(3, 4).is_on_same_axis_with(Point(2, 5))


def test_archimedes_spiral_starts_at_center() -> None:
    spiral = ArchimedesSpiral(Point(10, 20))
    assert spiral.next_point() == Point(10, 20)


def test_archimedes_spiral_known_points() -> None:
    spiral = ArchimedesSpiral(Point(10, 20), angle_step=math.pi / 2)
    points = [spiral.next_point() for _ in range(3)]
    assert points == [Point(10, 20), Point(10, 22), Point(7, 20)]


def test_archimedes_spiral_compression_stretches_axes() -> None:
    spiral = ArchimedesSpiral(Point(10, 20), angle_step=math.pi / 2, x_compression=2.0)
    points = [spiral.next_point() for _ in range(3)]
    assert points[2] == Point(4, 20)


def test_archimedes_spiral_radius_grows_by_angle_step() -> None:
    step = math.pi / 360
    center = Point(5, -5)
    spiral = ArchimedesSpiral(center, angle_step=step)
    rounding = math.sqrt(0.5)
    previous = None
    for k in range(5000):
        # The unrounded radius equals the angle.
        assert math.isclose(spiral.angle, k * step, abs_tol=1e-9)
        point = spiral.next_point()
        # Integer rounding moves each coordinate by at most half a unit.
        distance = point.distance_to(center)
        assert abs(distance - k * step) <= rounding + 1e-9
        if previous is not None:
            # Consecutive radii differ by exactly step before rounding; after
            # rounding both ends may drift by up to sqrt(0.5) each.
            assert distance - previous <= step + 2 * rounding + 1e-9
            assert distance - previous >= -2 * rounding - 1e-9
        previous = distance


def test_archimedes_spiral_rejects_bad_parameters() -> None:
    with pytest.raises(ValueError):
        ArchimedesSpiral(Point(0, 0), angle_step=0.0)
    with pytest.raises(ValueError):
        ArchimedesSpiral(Point(0, 0), y_compression=-1.0)


def test_square_spiral_walks_growing_legs() -> None:
    spiral = SquareSpiral(Point(0, 0))
    points = [spiral.next_point() for _ in range(10)]
    assert points == [
        Point(0, 0),
        Point(1, 0),
        Point(1, 1),
        Point(0, 1),
        Point(-1, 1),
        Point(-1, 0),
        Point(-1, -1),
        Point(0, -1),
        Point(1, -1),
        Point(2, -1),
    ]


def test_point_sources_satisfy_protocol() -> None:
    assert isinstance(ArchimedesSpiral(Point(0, 0)), PointGenerator)
    assert isinstance(SquareSpiral(Point(0, 0), step=3), PointGenerator)
    assert isinstance(IterablePointSource([]), PointGenerator)


def test_first_rectangle_is_centered_on_origin() -> None:
    for size in (Size(12, 34), Size(5, 5), Size(1, 1), Size(8, 3)):
        layouter = _layouter(Point(100, -40))
        rect = layouter.place(size)
        assert rect.center == Point(100, -40)
        assert rect.size == size


@pytest.mark.parametrize("size", [Size(0, 1), Size(0, 0), Size(-1, 3), Size(3, -1), Size(4, 0)])
def test_invalid_sizes_are_rejected_without_side_effects(size: Size) -> None:
    spiral = ArchimedesSpiral(Point(0, 0))
    layouter = CircularCloudLayouter(Point(0, 0), spiral)
    layouter.place(Size(4, 4))
    angle_before = spiral.angle

    with pytest.raises(InvalidSizeError) as excinfo:
        layouter.place(size)

    assert excinfo.value.size == size
    assert isinstance(excinfo.value, ValueError)
    assert len(layouter.placed) == 1
    assert spiral.angle == angle_before


def test_four_rectangles_end_to_end() -> None:
    layouter = _layouter()
    sizes = [Size(12, 34), Size(5, 5), Size(5, 5), Size(5, 5)]
    rects = [layouter.place(size) for size in sizes]

    assert rects[0].center == Point(0, 0)
    assert len({rect.center for rect in rects}) == 4
    assert [rect.size for rect in rects] == sizes
    _assert_no_overlaps(rects)
    assert list(layouter.placed) == rects


def test_random_sizes_never_overlap() -> None:
    rng = random.Random(1234)
    layouter = _layouter(Point(300, 300))
    sizes = [Size(rng.randint(1, 30), rng.randint(1, 15)) for _ in range(80)]
    for size in sizes:
        layouter.place(size)
        _assert_no_overlaps(layouter.placed)
    assert [rect.size for rect in layouter.placed] == sizes


def test_cloud_stays_compact() -> None:
    width, height, count = 10, 10, 100
    center = Point(0, 0)
    layouter = _layouter(center)
    rects = layouter.place_all(Size(width, height) for _ in range(count))
    limit = 2.0 * math.sqrt(width * height * count)
    for rect in rects:
        assert rect.center.distance_to(center) < limit


def test_compaction_slides_until_touching() -> None:
    source = IterablePointSource([Point(0, 0), Point(30, 3)])
    layouter = CircularCloudLayouter(Point(0, 0), source)
    layouter.place(Size(10, 10))
    moved = layouter.place(Size(10, 10))
    # Horizontal pass stops when the edges touch, vertical pass one unit short of the center row.
    assert moved == Rectangle(Point(5, -4), Size(10, 10))
    assert moved.center == Point(10, 1)


def test_compaction_stops_one_unit_short_of_center_column() -> None:
    source = IterablePointSource([Point(0, 0), Point(3, 40)])
    layouter = CircularCloudLayouter(Point(0, 0), source)
    layouter.place(Size(10, 10))
    moved = layouter.place(Size(4, 4))
    assert moved == Rectangle(Point(-1, 5), Size(4, 4))
    assert moved.center == Point(1, 7)
    assert not moved.center.is_on_same_axis_with(Point(0, 0))


def test_compaction_never_reaches_center_row_or_column() -> None:
    source = IterablePointSource([Point(5, -50)])
    layouter = CircularCloudLayouter(Point(0, 0), source)
    rect = layouter.place(Size(6, 6))
    assert rect.center == Point(1, -1)


def test_rectangle_already_on_center_column_is_not_moved() -> None:
    source = IterablePointSource([Point(0, -50)])
    layouter = CircularCloudLayouter(Point(0, 0), source)
    rect = layouter.place(Size(6, 6))
    assert rect.center == Point(0, -50)


def test_finite_point_source_raises_contract_error() -> None:
    layouter = CircularCloudLayouter(Point(0, 0), IterablePointSource([Point(0, 0)]))
    layouter.place(Size(3, 3))
    with pytest.raises(PointSourceExhaustedError) as excinfo:
        layouter.place(Size(3, 3))
    assert excinfo.value.attempts == 0
    assert len(layouter.placed) == 1


def test_exhaustion_counts_only_received_candidates() -> None:
    layouter = CircularCloudLayouter(Point(0, 0), IterablePointSource([Point(0, 0), Point(1, 1)]))
    layouter.place(Size(4, 4))
    with pytest.raises(PointSourceExhaustedError) as excinfo:
        layouter.place(Size(4, 4))
    assert excinfo.value.attempts == 1


def test_point_source_raising_stop_iteration_is_reported() -> None:
    class Broken:
        def next_point(self) -> Point:
            raise StopIteration

    layouter = CircularCloudLayouter(Point(0, 0), Broken())
    with pytest.raises(PointSourceExhaustedError) as excinfo:
        layouter.place(Size(2, 2))
    assert excinfo.value.attempts == 0
    assert layouter.placed == ()


def test_attempt_guard_stops_search() -> None:
    source = IterablePointSource(itertools.repeat(Point(0, 0)))
    layouter = CircularCloudLayouter(Point(0, 0), source, max_attempts=50)
    layouter.place(Size(4, 4))
    with pytest.raises(PointSourceExhaustedError) as excinfo:
        layouter.place(Size(4, 4))
    assert excinfo.value.attempts == 50
    assert len(layouter.placed) == 1


def test_max_attempts_must_be_positive() -> None:
    with pytest.raises(ValueError):
        CircularCloudLayouter(Point(0, 0), SquareSpiral(Point(0, 0)), max_attempts=0)


def test_square_spiral_placement_never_overlaps() -> None:
    layouter = CircularCloudLayouter(Point(0, 0), SquareSpiral(Point(0, 0)))
    rects = layouter.place_all([Size(12, 34), Size(5, 5), Size(5, 5), Size(20, 3), Size(7, 7)])
    assert rects[0].center == Point(0, 0)
    _assert_no_overlaps(rects)


def test_bounding_box_encloses_all_rectangles() -> None:
    layouter = _layouter()
    assert layouter.bounding_box() is None
    rects = layouter.place_all([Size(10, 4), Size(6, 6), Size(3, 9)])
    box = layouter.bounding_box()
    assert box is not None
    for rect in rects:
        assert box.left <= rect.left and rect.right <= box.right
        assert box.top <= rect.top and rect.bottom <= box.bottom

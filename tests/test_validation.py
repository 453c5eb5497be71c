"""Unit tests for validation module."""

import pytest

from earclip.validation import (
    ValidationWarning,
    ValidationResult,
    check_triangle_count,
    check_indices,
    check_area,
    check_overlaps,
    check_triangulation,
)
from earclip.config import TriangulationConfig
from earclip.geometry import Triangle
from earclip.triangulation import triangulate


class TestValidationResult:
    """Tests for ValidationResult class."""

    def test_empty_is_valid(self):
        """Test no warnings means valid."""
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_errors
        assert result.error_count == 0

    def test_errors_counted(self):
        """Test error severity makes result invalid."""
        result = ValidationResult(warnings=[
            ValidationWarning("area", "error", "bad area"),
            ValidationWarning("overlap", "warning", "close call"),
        ])
        assert not result.is_valid
        assert result.error_count == 1
        assert len(result.get_by_category("overlap")) == 1


class TestChecks:
    """Tests for individual checks."""

    def test_count_ok(self, square):
        """Test n - 2 triangles pass."""
        assert check_triangle_count(square, [(0, 1, 2), (0, 2, 3)]) == []

    def test_count_wrong(self, square):
        """Test wrong triangle count is an error."""
        warnings = check_triangle_count(square, [(0, 1, 2)])
        assert len(warnings) == 1
        assert warnings[0].details == {"expected": 2, "actual": 1}

    def test_count_small_polygon(self):
        """Test fewer than three vertices expects no triangles."""
        assert check_triangle_count([(0, 0), (1, 0)], []) == []

    def test_indices_out_of_range(self, square):
        """Test index past the vertex list is an error."""
        warnings = check_indices(square, [(0, 1, 4)])
        assert len(warnings) == 1
        assert warnings[0].details["indices"] == [4]

    def test_indices_repeated(self, square):
        """Test triangle repeating a vertex is an error."""
        warnings = check_indices(square, [(0, 1, 1)])
        assert len(warnings) == 1
        assert "repeats" in warnings[0].message

    def test_area_ok(self, square):
        """Test matching area passes."""
        assert check_area(square, [(0, 1, 2), (0, 2, 3)]) == []

    def test_area_missing(self, square):
        """Test uncovered area is an error."""
        warnings = check_area(square, [(0, 1, 2)])
        assert len(warnings) == 1
        assert warnings[0].details["triangle_area"] == pytest.approx(0.5)
        assert warnings[0].details["polygon_area"] == pytest.approx(1.0)

    def test_area_accepts_triangle_objects(self, square):
        """Test Triangle objects work as index triples."""
        assert check_area(square, [Triangle(3, 0, 1), Triangle(3, 1, 2)]) == []

    def test_shared_edge_no_overlap(self, square):
        """Test triangles sharing an edge do not overlap."""
        assert check_overlaps(square, [(0, 1, 2), (0, 2, 3)]) == []

    def test_duplicate_triangle_overlaps(self, square):
        """Test the same triangle twice overlaps itself."""
        warnings = check_overlaps(square, [(0, 1, 2), (0, 1, 2)])
        assert len(warnings) == 1

    def test_crossing_triangles_overlap(self, square):
        """Test triangles on crossing diagonals overlap."""
        warnings = check_overlaps(square, [(0, 1, 2), (0, 1, 3)])
        assert len(warnings) == 1

    def test_degenerate_triangle_no_overlap(self, sample_quad):
        """Test zero-area triangle never overlaps."""
        assert check_overlaps(sample_quad, [(1, 2, 3), (3, 0, 1)]) == []


class TestCheckTriangulation:
    """Tests for check_triangulation()."""

    def test_valid(self, l_shape):
        """Test ear clipping output validates."""
        result = check_triangulation(l_shape, triangulate(l_shape))
        assert result.is_valid
        assert result.warnings == []

    def test_overlap_with_matching_area(self, square):
        """Test overlap is caught even when the area adds up."""
        result = check_triangulation(square, [(0, 1, 2), (0, 1, 2)])
        assert not result.is_valid
        assert result.get_by_category("area") == []
        assert len(result.get_by_category("overlap")) == 1

    def test_bad_indices_skip_geometry(self, square):
        """Test area and overlap checks are skipped for bad indices."""
        result = check_triangulation(square, [(0, 1, 9), (0, 2, 3)])
        assert not result.is_valid
        assert result.get_by_category("area") == []
        assert result.get_by_category("overlap") == []
        assert len(result.get_by_category("indices")) == 1

    def test_tolerance_from_config(self):
        """Test area tolerance comes from the config."""
        # Vertex 3 bulges 1e-6 above the top edge; its sliver is left uncovered
        pentagon = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.5, 1.0 + 1e-6), (0.0, 1.0)]
        triangles = [(0, 1, 2), (0, 2, 4)]

        strict = check_triangulation(pentagon, triangles)
        assert len(strict.get_by_category("area")) == 1

        loose = check_triangulation(pentagon, triangles, TriangulationConfig(area_tolerance=1e-3))
        assert loose.get_by_category("area") == []

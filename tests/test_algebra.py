"""Tests for interval algebra on chromosomal regions.

The move and extend tests apply a sequence of operations to the same
region, as a caller walking a window along a chromosome would.
"""

import math

import pytest

from chromregion import ChromRegion, round_half_up
from chromregion.core import algebra
from chromregion.errors import InvalidArgumentError


# =============================================================================
# Test Helpers
# =============================================================================


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1000.5, 1001),
            (-3000.5, -3000),
            (-1249.5, -1249),
            (2.5, 3),
            (2.4, 2),
            (-2.6, -3),
            (7, 7),
        ],
    )
    def test_rounding(self, value, expected):
        """Halves go towards positive infinity."""
        assert round_half_up(value) == expected


# =============================================================================
# Test Overlap-based Operations
# =============================================================================


class TestOverlap:
    """Tests for overlap."""

    def test_overlap(self):
        """Overlap length of two regions."""
        a = ChromRegion("chr1:12345-67890")
        b = ChromRegion("chr1:60000-77890(+)")
        assert a.overlap(b) == 7891
        assert b.overlap(a) == 7891

    def test_strand_specific(self):
        """Opposite known strands do not overlap when strand-specific."""
        a = ChromRegion("chr1:12345-67890(-)")
        b = ChromRegion("chr1:60000-77890(+)")
        assert a.overlap(b) == 7891
        assert a.overlap(b, strand_specific=True) == 0

    def test_unknown_strand_matches(self):
        """An unknown strand matches either strand."""
        a = ChromRegion("chr1:12345-67890")
        b = ChromRegion("chr1:60000-77890(+)")
        assert a.overlap(b, strand_specific=True) == 7891

    def test_adjacent(self):
        """Adjacent regions do not overlap."""
        assert ChromRegion("chr1:1-100").overlap(ChromRegion("chr1:101-200")) == 0

    def test_different_chromosome(self):
        """Regions on different chromosomes do not overlap."""
        assert ChromRegion("chr1:1-100").overlap(ChromRegion("chr2:1-100")) == 0

    def test_contained(self):
        """A contained region overlaps by its full length."""
        assert ChromRegion("chr1:1-1000").overlap(ChromRegion("chr1:101-200")) == 100


class TestAssimilate:
    """Tests for assimilate."""

    def test_overlapping(self):
        """Overlapping regions merge into their union."""
        a = ChromRegion("chr1:12345-67890")
        result = a.assimilate(ChromRegion("chr1:60000-167890"))
        assert result is a
        assert a.length == 155546
        assert str(a) == "chr1:12345-167890"

    def test_contained(self):
        """Assimilating a contained region keeps the larger one."""
        a = ChromRegion("chr1:101-200")
        b = ChromRegion("chr1:1-1000")
        a.assimilate(b)
        assert a.length >= max(b.length, 100)
        assert str(a) == "chr1:1-1000"

    def test_non_overlapping(self):
        """Non-overlapping regions are not merged."""
        a = ChromRegion("chr1:1-100")
        assert a.assimilate(ChromRegion("chr1:201-300")) is None
        assert str(a) == "chr1:1-100"

    def test_ignore_overlap(self):
        """ignore_overlap merges disjoint regions on the same chromosome."""
        a = ChromRegion("chr1:1-100")
        assert a.assimilate(ChromRegion("chr1:201-300"), ignore_overlap=True) is a
        assert str(a) == "chr1:1-300"

    def test_ignore_overlap_different_chromosome(self):
        """Regions on different chromosomes are never merged."""
        a = ChromRegion("chr1:1-100")
        assert a.assimilate(ChromRegion("chr2:1-300"), ignore_overlap=True) is None

    def test_strand_specific(self):
        """Opposite strands block assimilation when strand-specific."""
        a = ChromRegion("chr1:1-100(+)")
        assert a.assimilate(ChromRegion("chr1:50-300(-)"), strand_specific=True) is None
        assert a.assimilate(ChromRegion("chr1:50-300(-)")) is a
        assert str(a) == "chr1:1-300 (+)"


class TestConcat:
    """Tests for concat."""

    def test_following(self):
        """A region starting at our end is appended."""
        a = ChromRegion("chr1:12345-67890(+)")
        assert a.concat(ChromRegion("chr1:67891-167890(+)")) is a
        assert str(a) == "chr1:12345-167890 (+)"

    def test_preceding(self):
        """A region ending at our start is prepended."""
        a = ChromRegion("chr1:12345-67890(+)")
        assert a.concat(ChromRegion("chr1:1-12344")) is a
        assert str(a) == "chr1:1-67890 (+)"

    def test_overlapping_not_concatenated(self):
        """Overlapping regions are not adjacent."""
        a = ChromRegion("chr1:12345-67890")
        assert a.concat(ChromRegion("chr1:60000-167890")) is None
        assert str(a) == "chr1:12345-67890"

    def test_gap_not_concatenated(self):
        """Regions with a gap are not adjacent."""
        a = ChromRegion("chr1:1-100")
        assert a.concat(ChromRegion("chr1:102-200")) is None

    def test_strand_specific(self):
        """Opposite strands block concatenation when strand-specific."""
        a = ChromRegion("chr1:1-100(+)")
        assert a.concat(ChromRegion("chr1:101-200(-)"), strand_specific=True) is None
        assert a.concat(ChromRegion("chr2:101-200(+)")) is None


class TestIntersect:
    """Tests for intersect."""

    def test_sequence(self):
        """Repeated intersection narrows the region."""
        r1 = ChromRegion("chr1:2001-50000(-)")
        r1.intersect(ChromRegion("chr1:1-40000"))
        assert str(r1) == "chr1:2001-40000 (-)"
        r1.intersect(ChromRegion("chr1:5001-60000(-)"))
        assert str(r1) == "chr1:5001-40000 (-)"
        r1.intersect(ChromRegion("chr1:20001-30000"))
        assert str(r1) == "chr1:20001-30000 (-)"
        r1.intersect(ChromRegion("chr1:10001-28000(+)"))
        assert str(r1) == "chr1:20001-28000 (-)"

    def test_disjoint(self):
        """Disjoint regions leave the region unchanged."""
        a = ChromRegion("chr1:1-100")
        assert a.intersect(ChromRegion("chr1:101-200")) is None
        assert str(a) == "chr1:1-100"

    def test_strand_specific(self):
        """Opposite strands do not intersect when strand-specific."""
        a = ChromRegion("chr1:1-100(-)")
        assert a.intersect(ChromRegion("chr1:50-200(+)"), strand_specific=True) is None
        assert str(a) == "chr1:1-100 (-)"


class TestMinus:
    """Tests for minus."""

    def test_split(self):
        """Subtracting an inner region leaves two pieces."""
        r3 = ChromRegion("chr1:5001-50000(-)", extra={"name": "3"})
        pieces = r3.minus(ChromRegion("chr1:15001-28000"))
        assert [str(p) for p in pieces] == ["chr1:5001-15000 (-)", "chr1:28001-50000 (-)"]
        assert all(p.name == "3" for p in pieces)
        assert str(r3) == "chr1:5001-50000 (-)"

    def test_zero_length_split(self):
        """A zero-length region strictly inside still splits."""
        r3 = ChromRegion("chr1:5001-50000(-)")
        pieces = r3.minus(ChromRegion("chr1:12001-12000"))
        assert [str(p) for p in pieces] == ["chr1:5001-12000 (-)", "chr1:12001-50000 (-)"]

    def test_left_overlap(self):
        """Overlap at the start leaves the right piece."""
        pieces = ChromRegion("chr1:1001-2000").minus(ChromRegion("chr1:1-1500"))
        assert [str(p) for p in pieces] == ["chr1:1501-2000"]

    def test_right_overlap(self):
        """Overlap at the end leaves the left piece."""
        pieces = ChromRegion("chr1:1001-2000").minus(ChromRegion("chr1:1501-3000"))
        assert [str(p) for p in pieces] == ["chr1:1001-1500"]

    def test_covered(self):
        """A covering region leaves nothing."""
        assert ChromRegion("chr1:1001-2000").minus(ChromRegion("chr1:1-3000")) == []

    def test_no_overlap(self):
        """Untouched regions come back as the same instance."""
        a = ChromRegion("chr1:1001-2000")
        result = a.minus(ChromRegion("chr1:2001-3000"))
        assert len(result) == 1
        assert result[0] is a
        assert a.minus(ChromRegion("chr2:1-3000"))[0] is a

    def test_strand_specific(self):
        """Opposite strands leave the region whole when strand-specific."""
        r3 = ChromRegion("chr1:5001-50000(-)")
        result = r3.minus(ChromRegion("chr1:15001-28000(+)"), strand_specific=True)
        assert result == [r3]
        assert result[0] is r3

    @pytest.mark.parametrize(
        "other",
        ["chr1:15001-28000", "chr1:1-15000", "chr1:40001-90000", "chr1:1-90000", "chr1:5001-5001"],
    )
    def test_pieces_and_overlap_cover_region(self, other):
        """Remaining pieces plus the overlap add up to the region length."""
        a = ChromRegion("chr1:5001-50000")
        b = ChromRegion(other)
        pieces = a.minus(b)
        assert sum(p.length for p in pieces) + a.overlap(b) == a.length

    def test_attributes_kept(self):
        """Pieces carry independent copies of the attributes."""
        a = ChromRegion({"chr": "chr1", "start": 0, "end": 100, "score": 3})
        left, right = algebra.minus(a, ChromRegion("chr1:41-60"))
        assert left.attributes == {"score": 3}
        assert right.attributes is not a.attributes


# =============================================================================
# Test Move
# =============================================================================


class TestMove:
    """Tests for move and get_shift."""

    def test_sequence(self, chrom_info_100k):
        """Moves are clamped to the floor and the chromosome end."""
        region = ChromRegion("chr2:1-50000(-)")
        table = chrom_info_100k

        region.move(5000, ref_table=table)
        assert str(region) == "chr2:5001-55000 (-)"
        region.move(-3000.5, ref_table=table)
        assert str(region) == "chr2:2001-52000 (-)"
        region.move(500000, ref_table=table)
        assert str(region) == "chr2:50001-100000 (-)"
        region.move(-0.5, is_proportion=True, ref_table=table)
        assert str(region) == "chr2:25001-75000 (-)"
        region.move(-1, is_proportion=True, ref_table=table)
        assert str(region) == "chr2:1-50000 (-)"

        shifted = region.get_shift(0.4, is_proportion=True, ref_table=table)
        assert str(shifted) == "chr2:20001-70000 (-)"
        assert str(region) == "chr2:1-50000 (-)"

    def test_relative_to_strand(self, chrom_info_100k):
        """On the negative strand, positive distances move left."""
        region = ChromRegion("chr2:1-50000(-)")
        table = chrom_info_100k

        region.move(-4000, ref_table=table, relative_to_strand=True)
        assert str(region) == "chr2:4001-54000 (-)"
        region.move(1000.5, ref_table=table, relative_to_strand=True)
        assert str(region) == "chr2:3000-52999 (-)"
        region.move(-0.5, is_proportion=True, ref_table=table, relative_to_strand=True)
        assert str(region) == "chr2:28000-77999 (-)"
        region.move(0.1, is_proportion=True, ref_table=table, relative_to_strand=True)
        assert str(region) == "chr2:23000-72999 (-)"

        shifted = region.get_shift(-0.2, is_proportion=True, ref_table=table, relative_to_strand=True)
        assert str(shifted) == "chr2:33000-82999 (-)"
        assert str(region) == "chr2:23000-72999 (-)"

    def test_relative_to_positive_strand(self):
        """On the positive strand the direction is unchanged."""
        region = ChromRegion("chr2:1001-2000(+)")
        region.move(100, relative_to_strand=True)
        assert str(region) == "chr2:1101-2100 (+)"

    def test_no_table(self):
        """Without a table there is no right bound."""
        region = ChromRegion("chr2:1-50000")
        region.move(10**9)
        assert region.start == 10**9

    def test_returns_self(self):
        """move returns the region itself."""
        region = ChromRegion("chr2:1-100")
        assert region.move(10) is region

    @pytest.mark.parametrize("distance", [math.nan, math.inf, "10", None, True])
    def test_invalid_distance(self, distance):
        """Distances must be finite numbers."""
        region = ChromRegion("chr2:1-100")
        with pytest.raises(InvalidArgumentError):
            region.move(distance)
        assert str(region) == "chr2:1-100"


# =============================================================================
# Test Extend
# =============================================================================


class TestExtend:
    """Tests for extend and get_extension."""

    def test_sequence(self, chrom_info_100k):
        """Extensions split around the center and respect the bounds."""
        region = ChromRegion("chr2:40001-50000(+)")
        table = chrom_info_100k

        region.extend(10000, ref_table=table)
        assert str(region) == "chr2:35001-55000 (+)"
        region.extend(-19000, ref_table=table)
        assert str(region) == "chr2:44501-45500 (+)"
        region.extend(9000, 44500, ref_table=table)
        assert str(region) == "chr2:44501-54500 (+)"
        region.extend(20000, 50500, ref_table=table)
        assert str(region) == "chr2:32501-62500 (+)"
        region.extend(-20000, 43750, ref_table=table)
        assert str(region) == "chr2:40001-50000 (+)"
        region.extend(10000, 0, ref_table=table)
        assert str(region) == "chr2:40001-60000 (+)"
        region.extend(-10000, 70000, ref_table=table)
        assert str(region) == "chr2:50001-60000 (+)"

    def test_proportion_sequence(self, chrom_info_100k):
        """Proportional extensions with minimum sizes and clamping."""
        region = ChromRegion("chr2:50001-60000(+)")
        table = chrom_info_100k

        region.extend(1.0, 0, is_proportion=True, ref_table=table)
        assert str(region) == "chr2:50001-70000 (+)"
        region.extend(1.5, None, is_proportion=True, ref_table=table)
        assert str(region) == "chr2:35001-85000 (+)"
        region.extend(-0.5, 65000, is_proportion=True, ref_table=table)
        assert str(region) == "chr2:50001-75000 (+)"
        region.extend(-1, 65000, is_proportion=True, ref_table=table, minimum_size=2500)
        assert str(region) == "chr2:63501-66000 (+)"

        extended = region.get_extension(0.4, is_proportion=True, ref_table=table)
        assert str(extended) == "chr2:63001-66500 (+)"
        extended = region.get_extension(-1, is_proportion=True, ref_table=table)
        assert str(extended) == "chr2:64750-64750 (+)"
        assert extended.length == 1
        extended = region.get_extension(20, 0, is_proportion=True, ref_table=table)
        assert str(extended) == "chr2:47501-100000 (+)"
        extended = region.get_extension(30, 1000000, is_proportion=True, ref_table=table)
        assert str(extended) == "chr2:1-77500 (+)"
        extended = region.get_extension(300, 1000000, is_proportion=True, ref_table=table)
        assert str(extended) == "chr2:1-100000 (+)"

        assert str(region) == "chr2:63501-66000 (+)"

    def test_zero_size_diff(self):
        """A zero size difference is a no-op."""
        region = ChromRegion("chr2:1001-2000")
        assert region.extend(0) is region
        assert str(region) == "chr2:1001-2000"

    def test_minimum_size_zero(self):
        """A minimum size of zero allows empty regions."""
        region = ChromRegion("chr2:1001-2000")
        region.extend(-5000, 1000, minimum_size=0)
        assert region.length == 0

    def test_no_table(self):
        """Without a table only the floor applies."""
        region = ChromRegion("chr2:1001-2000")
        region.extend(10000)
        assert str(region) == "chr2:1-11000"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"size_diff": math.nan},
            {"size_diff": math.inf},
            {"size_diff": "100"},
            {"size_diff": 100, "center": math.nan},
            {"size_diff": 100, "minimum_size": -1},
        ],
    )
    def test_invalid_arguments(self, kwargs):
        """Invalid numeric arguments are rejected."""
        region = ChromRegion("chr2:1001-2000")
        with pytest.raises(InvalidArgumentError):
            region.extend(**kwargs)
        assert str(region) == "chr2:1001-2000"

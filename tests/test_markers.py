#
# Strify - Markers Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from strify.markers import (
    DONT_RESOLVE, EXCLUDE, LEVEL_DEEP, LEVEL_ONLY,
    DontResolveType, ExcludeType, markers_of
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestMarkers:
    def test_singleton_identity(self):
        """Ensure each marker is a singleton object."""
        assert EXCLUDE is ExcludeType()
        assert DONT_RESOLVE is DontResolveType()

    @pytest.mark.parametrize(
        ("marker", "expected"),
        [
            pytest.param(EXCLUDE, "<EXCLUDE>", id="exclude"),
            pytest.param(DONT_RESOLVE, "<DONT_RESOLVE>", id="dont_resolve"),
        ],
    )
    def test_repr_clean(self, marker, expected):
        """Assert repr shows clean angle-bracketed name."""
        assert repr(marker) == expected
        assert marker.name == expected[1:-1]

    def test_identity_and_eq(self):
        """Verify identity and equality are aligned."""
        assert EXCLUDE == EXCLUDE
        assert EXCLUDE != DONT_RESOLVE
        assert EXCLUDE != "EXCLUDE"

    @pytest.mark.parametrize("marker", [EXCLUDE, DONT_RESOLVE], ids=["exclude", "dont_resolve"])
    def test_hash_is_identity_based(self, marker):
        """Hash markers by identity."""
        assert hash(marker) == id(marker)
        assert len({marker, marker}) == 1

    @pytest.mark.parametrize("marker", [EXCLUDE, DONT_RESOLVE], ids=["exclude", "dont_resolve"])
    def test_pickle_roundtrip(self, marker):
        """Unpickle to the same singleton."""
        assert pickle.loads(pickle.dumps(marker)) is marker

    def test_depth_limits(self):
        """Expose the depth limit constants."""
        assert LEVEL_ONLY == 0
        assert LEVEL_DEEP == -1


class TestMarkersOf:
    @pytest.mark.parametrize(
        ("metadata", "expected"),
        [
            pytest.param((), frozenset(), id="empty"),
            pytest.param((EXCLUDE,), frozenset({EXCLUDE}), id="exclude"),
            pytest.param((DONT_RESOLVE, EXCLUDE), frozenset({EXCLUDE, DONT_RESOLVE}), id="both"),
            pytest.param((ExcludeType,), frozenset({EXCLUDE}), id="marker-class"),
            pytest.param(("doc", 1, None, str), frozenset(), id="foreign"),
            pytest.param((EXCLUDE, EXCLUDE), frozenset({EXCLUDE}), id="duplicate"),
        ],
    )
    def test_pick(self, metadata, expected):
        """Pick markers out of annotation metadata."""
        assert markers_of(metadata) == expected

#
# Strify - Visited Set Tests
#

# Local ----------------------------------------------------------------------------------------------------------------
from strify.visited import VisitedSet


# Tests ----------------------------------------------------------------------------------------------------------------

class TestVisitedSet:
    def test_empty(self):
        """Start with nothing visited."""
        visited = VisitedSet()
        assert len(visited) == 0
        assert not visited.has_visited(None)

    def test_mark(self):
        """Remember marked objects."""
        visited, obj = VisitedSet(), object()
        visited.mark_visited(obj)
        assert visited.has_visited(obj)
        assert obj in visited

    def test_identity_not_equality(self):
        """Track equal but distinct objects separately."""
        visited = VisitedSet()
        a, b = [1, 2], [1, 2]
        visited.mark_visited(a)
        assert a == b
        assert b not in visited

    def test_mark_twice(self):
        """Count an object once however often it is marked."""
        visited, obj = VisitedSet(), {}
        visited.mark_visited(obj)
        visited.mark_visited(obj)
        assert len(visited) == 1

    def test_reset(self):
        """Forget everything on reset."""
        visited, obj = VisitedSet(), object()
        visited.mark_visited(obj)
        visited.reset()
        assert obj not in visited
        assert len(visited) == 0

    def test_unhashable(self):
        """Accept unhashable objects."""
        visited, obj = VisitedSet(), {"a": [1]}
        visited.mark_visited(obj)
        assert obj in visited

    def test_repr(self):
        """Show the number of visited objects."""
        visited = VisitedSet()
        visited.mark_visited(1.5)
        assert repr(visited) == "VisitedSet(len=1)"

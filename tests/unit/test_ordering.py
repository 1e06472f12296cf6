# ABOUTME: Unit tests for episode-ordering scheme selection.
# ABOUTME: Covers hint matching, first-scheme fallback and the no-scheme case.

from tuimdb.metadata.ordering import select_ordering
from tuimdb.metadata.types import EpisodeOrder

SCHEMES = [EpisodeOrder(id="1", name="A"), EpisodeOrder(id="2", name="B")]


class TestSelectOrdering:
    """Tests for select_ordering."""

    def test_hint_matches_second_scheme(self) -> None:
        """A hint naming a scheme selects that scheme's ID."""
        assert select_ordering(SCHEMES, "B") == "2"

    def test_unmatched_hint_falls_back_to_first(self) -> None:
        """A hint naming no scheme falls back to the first scheme."""
        assert select_ordering(SCHEMES, "Z") == "1"

    def test_no_schemes(self) -> None:
        """With no schemes there is nothing to select."""
        assert select_ordering([], "A") is None

    def test_no_hint_uses_first(self) -> None:
        """Without a hint the first scheme is used."""
        assert select_ordering([EpisodeOrder(id="5", name="Std")], None) == "5"

    def test_match_is_case_sensitive(self) -> None:
        """Scheme names are compared exactly."""
        assert select_ordering(SCHEMES, "b") == "1"

    def test_first_of_duplicate_names_wins(self) -> None:
        """When two schemes share a name, the earlier one is chosen."""
        schemes = [
            EpisodeOrder(id="1", name="Aired"),
            EpisodeOrder(id="2", name="DVD"),
            EpisodeOrder(id="3", name="DVD"),
        ]
        assert select_ordering(schemes, "DVD") == "2"

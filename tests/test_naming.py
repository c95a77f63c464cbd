"""Tests for series name resolution and filename heuristics."""

import pytest

from media_review.models import CatalogMatch, GroupableItem, MediaType, RecordSource
from media_review.naming import (
    SeriesNameResolver,
    extract_series_name,
    extract_series_name_from_display_name,
    strip_extension,
)


class TestExtractSeriesName:
    """Tests for extract_series_name."""

    def test_season_episode_code(self):
        assert extract_series_name("Breaking.Bad.S01E02.720p.mkv") == "Breaking.Bad"

    def test_lowercase_code(self):
        assert extract_series_name("the wire s02e10.mp4") == "the wire"

    def test_code_glued_to_title(self):
        assert extract_series_name("westworldS01E01.mkv") == "westworld"

    def test_localized_episode_marker(self):
        assert extract_series_name("庆余年 第12集.mp4") == "庆余年"

    def test_localized_season_marker(self):
        assert extract_series_name("庆余年第二季 01.mkv") == "庆余年"

    def test_numeral_separator_code(self):
        assert extract_series_name("Friends 1x05.avi") == "Friends"

    def test_ep_marker(self):
        assert extract_series_name("Naruto EP101.mkv") == "Naruto"

    def test_e_marker(self):
        assert extract_series_name("Naruto - E12.mkv") == "Naruto"

    def test_only_first_matching_pattern_applies(self):
        """A later pattern is not applied once an earlier one matched."""
        assert extract_series_name("Show E3 Special S01E02.mkv") == "Show E3 Special"

    def test_unknown_extension_is_kept(self):
        assert extract_series_name("Movie.Name.2019") == "Movie.Name.2019"

    def test_title_with_letter_before_e_digit(self):
        assert extract_series_name("Se7en.mkv") == "Se7en"

    def test_resolution_is_not_an_episode_code(self):
        assert extract_series_name("Movie 1920x1080.mkv") == "Movie 1920x1080"

    def test_trailing_bracket_is_trimmed(self):
        assert extract_series_name("Show [S01E01].mkv") == "Show"

    def test_empty_result_falls_back(self):
        assert extract_series_name("S01E01.mkv") == "Unknown Series"
        assert extract_series_name("") == "Unknown Series"

    def test_custom_fallback(self):
        assert extract_series_name("E01.mkv", fallback="") == ""

    @pytest.mark.parametrize("name", ["Inception", "The Office (US)", "Movie.Name.2019", "庆余年"])
    def test_marker_free_name_is_unchanged(self, name):
        assert extract_series_name(name) == name
        assert extract_series_name(f"  {name}  ") == name

    def test_idempotent(self):
        once = extract_series_name("Breaking.Bad.S01E02.720p.mkv")
        assert extract_series_name(once) == once


class TestExtractSeriesNameFromDisplayName:
    """Tests for the generated display name variant."""

    def test_strips_separator_before_code(self):
        assert extract_series_name_from_display_name("Breaking Bad - S01E02.mkv") == "Breaking Bad"

    def test_strips_episode_title_after_code(self):
        assert extract_series_name_from_display_name("Breaking Bad - S01E02 - Pilot.mkv") == "Breaking Bad"

    def test_dotted_separator(self):
        assert extract_series_name_from_display_name("Show.1x02.mkv") == "Show"

    def test_localized_marker(self):
        assert extract_series_name_from_display_name("不眠日 - 第1集.mp4") == "不眠日"

    def test_no_marker_keeps_name(self):
        assert extract_series_name_from_display_name("Dune (2021).mkv") == "Dune (2021)"

    def test_falls_back(self):
        assert extract_series_name_from_display_name(" - S01E01.mkv") == "Unknown Series"


class TestStripExtension:
    """Tests for strip_extension."""

    def test_known_extension(self):
        assert strip_extension("Show.MKV", [".mkv"]) == "Show"

    def test_unknown_extension(self):
        assert strip_extension("Show.Name", [".mkv"]) == "Show.Name"


class TestSeriesNameResolver:
    """Tests for SeriesNameResolver.resolve."""

    @pytest.fixture
    def resolver(self, config):
        return SeriesNameResolver(config)

    def test_tv_catalog_name_wins(self, resolver):
        item = GroupableItem(
            raw_name="bb.s01e01.mkv",
            media_type=MediaType.TV_SHOW,
            catalog_match=CatalogMatch(name="Breaking Bad"),
            parsed_title="bb",
        )
        assert resolver.resolve(item) == "Breaking Bad"

    def test_movie_catalog_title_and_release_year(self, resolver):
        item = GroupableItem(
            raw_name="dune.mkv",
            media_type=MediaType.MOVIE,
            catalog_match=CatalogMatch(title="Dune", release_date="2021-10-22"),
            parsed_year=2020,
        )
        assert resolver.resolve(item) == "Dune (2021)"

    def test_movie_catalog_without_release_date_uses_parsed_year(self, resolver):
        item = GroupableItem(
            raw_name="dune.mkv",
            media_type=MediaType.MOVIE,
            catalog_match=CatalogMatch(title="Dune"),
            parsed_year=1984,
        )
        assert resolver.resolve(item) == "Dune (1984)"

    def test_movie_catalog_without_any_year(self, resolver):
        item = GroupableItem(
            raw_name="dune.mkv",
            media_type=MediaType.MOVIE,
            catalog_match=CatalogMatch(title="Dune", release_date=""),
        )
        assert resolver.resolve(item) == "Dune (unknown)"

    def test_catalog_without_name_falls_back_to_parsed_title(self, resolver):
        item = GroupableItem(
            raw_name="x.mkv",
            media_type=MediaType.TV_SHOW,
            catalog_match=CatalogMatch(),
            parsed_title="Parsed Show",
        )
        assert resolver.resolve(item) == "Parsed Show"

    def test_parsed_tv_title(self, resolver):
        item = GroupableItem(raw_name="x.mkv", media_type=MediaType.TV_SHOW, parsed_title="Dark")
        assert resolver.resolve(item) == "Dark"

    def test_parsed_movie_title_with_year(self, resolver):
        item = GroupableItem(raw_name="x.mkv", media_type=MediaType.MOVIE,
                             parsed_title="Heat", parsed_year=1995)
        assert resolver.resolve(item) == "Heat (1995)"

    def test_parsed_movie_title_without_year(self, resolver):
        item = GroupableItem(raw_name="x.mkv", media_type=MediaType.MOVIE, parsed_title="Heat")
        assert resolver.resolve(item) == "Heat (unknown)"

    def test_unknown_media_type_uses_filename(self, resolver):
        item = GroupableItem(raw_name="Some.Show.S01E01.mkv", media_type=MediaType.UNKNOWN,
                             parsed_title="ignored")
        assert resolver.resolve(item) == "Some.Show"

    def test_blank_parsed_title_uses_filename(self, resolver):
        item = GroupableItem(raw_name="Dark.S01E01.mkv", media_type=MediaType.TV_SHOW,
                             parsed_title="   ")
        assert resolver.resolve(item) == "Dark"

    def test_nothing_usable_gives_unknown_series(self, resolver):
        item = GroupableItem(raw_name="E01.mkv")
        assert resolver.resolve(item) == "Unknown Series"

    def test_preview_uses_hint(self, resolver):
        item = GroupableItem(raw_name="Dark - S01E01.mkv", media_type=MediaType.TV_SHOW,
                             source=RecordSource.PREVIEW, series_name_hint="Dark")
        assert resolver.resolve(item) == "Dark"

    def test_preview_without_hint_parses_display_name(self, resolver):
        item = GroupableItem(raw_name="Dark - S01E01.mkv", media_type=MediaType.TV_SHOW,
                             source=RecordSource.PREVIEW)
        assert resolver.resolve(item) == "Dark"

    def test_custom_unknown_label(self, config):
        config["display"]["unknown_series"] = "???"
        assert SeriesNameResolver(config).resolve(GroupableItem(raw_name="S01E01")) == "???"

"""Unit tests for CommunitySortKey parsing."""

import pytest

from src.domain.enums import CommunitySortKey


@pytest.mark.unit
class TestCommunitySortKeyParse:
    """Test CommunitySortKey.parse()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("id", CommunitySortKey.ID),
            ("createdat", CommunitySortKey.CREATED_AT),
            ("CreatedAt", CommunitySortKey.CREATED_AT),
            ("postscount", CommunitySortKey.POSTS_COUNT),
            ("PostsCount", CommunitySortKey.POSTS_COUNT),
            ("SUBSCRIBERSCOUNT", CommunitySortKey.SUBSCRIBERS_COUNT),
        ],
    )
    def test_known_keys_are_case_insensitive(self, raw, expected):
        assert CommunitySortKey.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "name", "popularity", "created_at"])
    def test_unknown_or_missing_key_falls_back_to_id(self, raw):
        assert CommunitySortKey.parse(raw) is CommunitySortKey.ID

    def test_values_are_lowercase_wire_names(self):
        assert [key.value for key in CommunitySortKey] == [
            "id",
            "createdat",
            "postscount",
            "subscriberscount",
        ]

"""Tests for tool parameter validation."""

import pytest

from github_discussions_mcp.common.validators import (
    optional_choice,
    optional_pagination,
    parse_pinned,
    require_int,
    require_string,
    validate_owner,
    validate_repo_name,
)
from github_discussions_mcp.exceptions import ValidationError


class TestRequireString:

    def test_valid(self):
        assert require_string("hello", "title") == "hello"

    def test_missing(self):
        with pytest.raises(ValidationError, match="missing required parameter: title"):
            require_string(None, "title")

    def test_empty_counts_as_missing(self):
        with pytest.raises(ValidationError, match="missing required parameter: body") as exc_info:
            require_string("", "body")

        assert exc_info.value.field_errors == {"body": "missing"}

    def test_wrong_type(self):
        with pytest.raises(ValidationError, match="parameter title is not of type string"):
            require_string(42, "title")


class TestRequireInt:

    def test_valid(self):
        assert require_int(42, "discussion_number") == 42

    def test_integral_float(self):
        result = require_int(42.0, "discussion_number")

        assert result == 42
        assert isinstance(result, int)

    def test_fractional_float(self):
        with pytest.raises(ValidationError, match="not an integer"):
            require_int(4.5, "discussion_number")

    def test_zero_counts_as_missing(self):
        with pytest.raises(ValidationError, match="missing required parameter: discussion_number"):
            require_int(0, "discussion_number")

    def test_negative(self):
        with pytest.raises(ValidationError, match="positive integer"):
            require_int(-1, "discussion_number")

    @pytest.mark.parametrize("value", ["42", True])
    def test_wrong_type(self, value):
        with pytest.raises(ValidationError, match="not of type number"):
            require_int(value, "discussion_number")


class TestOwnerAndRepo:

    @pytest.mark.parametrize("owner", ["owner", "octo-org", "a1", "own_er", "acme_emu"])
    def test_valid_owner(self, owner):
        assert validate_owner(owner) == owner

    @pytest.mark.parametrize(
        "owner,message,reason",
        [
            ("", "missing required parameter: owner", "missing"),
            (None, "missing required parameter: owner", "missing"),
            (7, "parameter owner is not of type string", "type"),
            ("octo/org", "cannot contain '/'", "format"),
        ],
    )
    def test_invalid_owner(self, owner, message, reason):
        with pytest.raises(ValidationError, match=message) as exc_info:
            validate_owner(owner)

        assert exc_info.value.field_errors == {"owner": reason}

    @pytest.mark.parametrize("repo", ["repo", "my.repo", "my_repo-2", ".github", "-repo", "repo."])
    def test_valid_repo(self, repo):
        assert validate_repo_name(repo) == repo

    @pytest.mark.parametrize(
        "repo,message,reason",
        [
            ("", "missing required parameter: repo", "missing"),
            ("owner/repo", "cannot contain '/'", "format"),
        ],
    )
    def test_invalid_repo(self, repo, message, reason):
        with pytest.raises(ValidationError, match=message) as exc_info:
            validate_repo_name(repo)

        assert exc_info.value.field_errors == {"repo": reason}


class TestOptionalParameters:

    def test_pagination_defaults(self):
        opts = optional_pagination()

        assert (opts.page, opts.per_page) == (1, 30)

    def test_pagination_passthrough(self):
        opts = optional_pagination(2, 50)

        assert (opts.page, opts.per_page) == (2, 50)

    def test_pagination_out_of_range(self):
        with pytest.raises(ValidationError, match="invalid pagination parameters") as exc_info:
            optional_pagination(1, 500)

        assert exc_info.value.field_errors == {"pagination": "range"}

    def test_choice_absent(self):
        assert optional_choice(None, "direction", ("asc", "desc")) is None
        assert optional_choice("", "direction", ("asc", "desc")) is None

    def test_choice_invalid(self):
        with pytest.raises(ValidationError, match="must be one of asc, desc"):
            optional_choice("up", "direction", ("asc", "desc"))

    @pytest.mark.parametrize("value,expected", [("true", True), ("false", False), (None, None)])
    def test_parse_pinned(self, value, expected):
        assert parse_pinned(value) is expected

"""
Unit tests for chatlog.core.dates.
"""
import pendulum

from chatlog.core.dates import DateArgument, date_string, parse_date_token, resolve_date


class TestResolveDate:
    """Test the resolve_date function."""

    def test_no_tokens_is_today(self, fixed_today):
        date, remaining = resolve_date([], fixed_today)
        assert date == DateArgument("20250115", explicit=False)
        assert remaining == []

    def test_yesterday(self, fixed_today):
        date, remaining = resolve_date(["yesterday"], fixed_today)
        assert date == DateArgument("20250114", explicit=True)
        assert remaining == []

    def test_days_back(self, fixed_today):
        date, _ = resolve_date(["-5"], fixed_today)
        assert date.value == "20250110"
        assert date.explicit

    def test_days_back_across_year(self, fixed_today):
        date, _ = resolve_date(["-31"], fixed_today)
        assert date.value == "20241215"

    def test_days_back_across_leap_year(self, fixed_today):
        date, _ = resolve_date(["-400"], fixed_today)
        assert date.value == "20231212"

    def test_zero_days_back_is_explicit_today(self, fixed_today):
        date, _ = resolve_date(["-0"], fixed_today)
        assert date == DateArgument("20250115", explicit=True)

    def test_mmdd_uses_current_year(self, fixed_today):
        date, _ = resolve_date(["0704"], fixed_today)
        assert date.value == "20250704"

    def test_mmdd_is_not_validated(self, fixed_today):
        date, _ = resolve_date(["0231"], fixed_today)
        assert date.value == "20250231"

    def test_full_date_is_verbatim(self, fixed_today):
        date, _ = resolve_date(["20250704"], fixed_today)
        assert date == DateArgument("20250704", explicit=True)

    def test_subject_is_left_alone(self, fixed_today):
        date, remaining = resolve_date(["work", "extra"], fixed_today)
        assert not date.explicit
        assert date.value == "20250115"
        assert remaining == ["work", "extra"]

    def test_date_token_is_consumed(self, fixed_today):
        _, remaining = resolve_date(["yesterday", "work"], fixed_today)
        assert remaining == ["work"]

    def test_only_first_token_is_considered(self, fixed_today):
        date, remaining = resolve_date(["work", "yesterday"], fixed_today)
        assert not date.explicit
        assert remaining == ["work", "yesterday"]

    def test_tokens_are_not_mutated(self, fixed_today):
        tokens = ["-2", "work"]
        resolve_date(tokens, fixed_today)
        assert tokens == ["-2", "work"]


class TestParseDateToken:
    """Tokens that are not part of the date grammar."""

    def test_keywords_are_case_sensitive(self, fixed_today):
        assert parse_date_token("Yesterday", fixed_today) is None

    def test_offset_limited_to_five_digits(self, fixed_today):
        assert parse_date_token("-123456", fixed_today) is None
        assert parse_date_token("-99999", fixed_today) is not None

    def test_positive_offsets_are_not_dates(self, fixed_today):
        assert parse_date_token("+5", fixed_today) is None

    def test_full_date_must_be_this_century(self, fixed_today):
        assert parse_date_token("19991231", fixed_today) is None

    def test_partial_matches_are_rejected(self, fixed_today):
        assert parse_date_token("07045", fixed_today) is None
        assert parse_date_token("0704\n", fixed_today) is None
        assert parse_date_token("2025070", fixed_today) is None


def test_date_string_is_zero_padded():
    assert date_string(pendulum.date(2024, 3, 5)) == "20240305"

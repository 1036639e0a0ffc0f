"""Tests for command line option parsing."""

import pytest

from pg_check_conn.exceptions import ParseError
from pg_check_conn.models import ConnectionSpec
from pg_check_conn.parser import parse_args, scan


FORMS = [
    ("database", "-d", "--dbname"),
    ("username", "-U", "--username"),
    ("host", "-h", "--hostname"),
    ("port", "-p", "--port"),
    ("timeout", "-t", "--timeout"),
]


class TestParseArgs:
    """Both option styles and the values they produce."""

    def test_no_arguments_gives_empty_spec(self):
        spec = parse_args([])
        assert spec == ConnectionSpec()
        assert spec.is_empty()

    @pytest.mark.parametrize("field,short,long", FORMS)
    def test_short_and_long_forms_agree(self, field, short, long):
        from_short = parse_args([short, "value"])
        from_long = parse_args([f"{long}=value"])
        assert from_short == from_long
        assert getattr(from_short, field) == "value"

    def test_hostaddr_long_form(self):
        spec = parse_args(["--hostaddr=10.0.0.5"])
        assert spec.hostaddr == "10.0.0.5"
        assert spec.host is None

    def test_host_and_hostaddr_coexist(self):
        spec = parse_args(["-h", "db.internal", "--hostaddr=10.0.0.5"])
        assert spec.host == "db.internal"
        assert spec.hostaddr == "10.0.0.5"

    def test_full_command_line(self):
        spec = parse_args(["-d", "sales", "-U", "alice", "-h", "db.internal", "-p", "5433", "-t", "5"])
        assert spec == ConnectionSpec(
            database="sales",
            username="alice",
            host="db.internal",
            port="5433",
            timeout="5",
        )

    def test_values_are_trimmed(self):
        spec = parse_args(["-d", "  sales\t", "--username= alice "])
        assert spec.database == "sales"
        assert spec.username == "alice"

    def test_long_value_keeps_later_equals_signs(self):
        spec = parse_args(["--dbname=a=b"])
        assert spec.database == "a=b"

    def test_last_occurrence_wins(self):
        spec = parse_args(["-d", "first", "--dbname=second", "-p", "1", "-p", "2"])
        assert spec.database == "second"
        assert spec.port == "2"

    def test_unrecognized_flags_ignored(self):
        spec = parse_args(["--bogus", "-d", "sales", "-x", "stray"])
        assert spec == ConnectionSpec(database="sales")

    def test_long_options_match_on_prefix(self):
        spec = parse_args(["--dbnamefoo=x", "--portal=6000"])
        assert spec.database == "x"
        assert spec.port == "6000"

    def test_flag_after_valid_options_is_not_a_value(self):
        spec = parse_args(["-d", "sales", "-U", "-d"])
        assert isinstance(spec, ParseError)
        assert spec.field == "username"


class TestParseErrors:
    """Options present without a usable value."""

    def test_short_option_without_value(self):
        error = parse_args(["-d"])
        assert isinstance(error, ParseError)
        assert error.message == "missing database argument"
        assert error.field == "database"

    def test_short_option_followed_by_flag(self):
        error = parse_args(["-d", "-U", "alice"])
        assert isinstance(error, ParseError)
        assert "database" in error.message

    def test_short_option_blank_value(self):
        error = parse_args(["-p", "   "])
        assert isinstance(error, ParseError)
        assert error.message == "missing port argument"

    def test_long_option_empty_value(self):
        error = parse_args(["--dbname="])
        assert isinstance(error, ParseError)
        assert error.message == "missing database argument"

    def test_long_option_without_equals(self):
        error = parse_args(["--timeout", "5"])
        assert isinstance(error, ParseError)
        assert error.message == "missing timeout argument"

    @pytest.mark.parametrize("argv,label", [
        (["-U"], "username"),
        (["-h"], "hostname"),
        (["--hostname=\t"], "hostname"),
        (["--hostaddr="], "hostaddr"),
        (["-t", ""], "timeout"),
    ])
    def test_error_names_the_option(self, argv, label):
        error = parse_args(argv)
        assert isinstance(error, ParseError)
        assert error.message == f"missing {label} argument"

    def test_first_error_stops_parsing(self):
        error = parse_args(["--port=", "-d"])
        assert isinstance(error, ParseError)
        assert error.field == "port"

    def test_scan_raises(self):
        with pytest.raises(ParseError, match="missing database argument"):
            scan(["-d"])


class TestConnectionSpec:

    def test_rejects_empty_string(self):
        with pytest.raises(ValueError):
            ConnectionSpec(database="")

    def test_rejects_untrimmed_value(self):
        with pytest.raises(ValueError):
            ConnectionSpec(host=" db ")

    def test_is_immutable(self):
        spec = ConnectionSpec(database="sales")
        with pytest.raises(Exception):
            spec.database = "other"

from graphql import parse

from graphql_fixture_validator.assets import validate_test_assets
from graphql_fixture_validator.loader import FixtureData


def test_all_checks_pass(schema):
    fixture = FixtureData(
        input={"data": {"id": "1"}},
        expected_output={"operations": [{"message": "ok"}]},
    )
    report = validate_test_assets(schema, fixture, parse("{ data { id } }"), "handleResult")
    assert report.valid
    assert report.query_errors == []
    assert report.input.errors == []
    assert report.output.errors == []


def test_invalid_query_skips_fixture_input(schema):
    fixture = FixtureData(input={"data": {"id": "1"}})
    report = validate_test_assets(schema, fixture, parse("{ data { nope } }"))
    assert not report.valid
    assert len(report.query_errors) == 1
    assert "nope" in report.query_errors[0]
    assert report.input is None


def test_output_skipped_without_mutation(schema):
    fixture = FixtureData(input={"data": {"id": "1"}}, expected_output={"bad": True})
    report = validate_test_assets(schema, fixture, parse("{ data { id } }"))
    assert report.output is None
    assert report.valid


def test_invalid_output_fails_report(schema):
    fixture = FixtureData(input={"data": {"id": "1"}}, expected_output={"operations": [{}]})
    report = validate_test_assets(schema, fixture, parse("{ data { id } }"), "handleResult")
    assert report.input.valid
    assert not report.output.valid
    assert not report.valid


def test_invalid_input_fails_report(schema):
    fixture = FixtureData(input={"data": {}})
    report = validate_test_assets(schema, fixture, parse("{ data { id } }"))
    assert report.input.errors == ["Missing expected fixture data for id"]
    assert not report.valid

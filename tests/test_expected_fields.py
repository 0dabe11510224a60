from graphql_fixture_validator.expected_fields import ExpectedFields, extra_field_errors


USER = frozenset({"User"})
TEAM = frozenset({"Team"})


def test_record_common_and_typed(schema):
    scope = ExpectedFields()
    scope.record("id", None, frozenset({"User", "Team"}))
    scope.record("name", schema.get_type("User"), USER)
    scope.record("size", schema.get_type("Team"), TEAM)
    scope.record("nick", schema.get_type("User"), USER)

    assert scope.common == {"id"}
    assert scope.by_type[USER].fields == {"name", "nick"}
    assert scope.by_type[USER].type_condition == "User"
    assert scope.by_type[TEAM].fields == {"size"}


def test_same_type_condition_under_different_branches(schema):
    scope = ExpectedFields(typename_key="__typename")
    scope.record("uid", schema.get_type("Node"), USER)
    scope.record("tid", schema.get_type("Node"), TEAM)

    assert scope.by_type[USER].fields == {"uid"}
    assert scope.by_type[TEAM].fields == {"tid"}
    assert scope.applicable({"__typename": "Team"}) == {"tid"}


def _union_scope(schema):
    scope = ExpectedFields(typename_key="__typename")
    scope.record("__typename", None, frozenset({"Ok", "Err"}))
    scope.record("value", schema.get_type("Ok"), frozenset({"Ok"}))
    scope.record("message", schema.get_type("Err"), frozenset({"Err"}))
    return scope


def test_applicable_with_typename(schema):
    scope = _union_scope(schema)
    assert scope.applicable({"__typename": "Ok"}) == {"__typename", "value"}
    assert scope.applicable({"__typename": "Err"}) == {"__typename", "message"}


def test_applicable_without_typename_unions_everything(schema):
    scope = _union_scope(schema)
    assert scope.applicable({}) == {"__typename", "value", "message"}


def test_objects_are_kept_once():
    scope = ExpectedFields()
    obj = {"a": 1}
    scope.add_objects([obj, obj, None, 3])
    scope.add_objects([obj])
    assert scope.objects == [obj]


def test_child_scopes_are_separate():
    scope = ExpectedFields()
    first, second = scope.child("data"), scope.child("data")
    assert first is not second
    assert scope.children == [first, second]
    assert first.key == "data"


def test_object_in_several_scopes_expects_their_union():
    scope = ExpectedFields()
    obj = {"id": "1", "count": 2, "extra": True}
    first, second = scope.child("data"), scope.child("data")
    first.common.add("id")
    second.common.add("count")
    first.add_objects([obj])
    second.add_objects([obj])

    assert extra_field_errors(scope) == [
        'Extra field "extra" found in fixture data not in query'
    ]


def test_extra_field_errors_walk_children(schema):
    scope = _union_scope(schema)
    scope.add_objects([{"__typename": "Ok", "value": 1, "message": "x"}])
    child = scope.child("details")
    child.common.add("name")
    child.add_objects([{"name": "a", "age": 3}])

    assert extra_field_errors(scope) == [
        'Extra field "message" found in fixture data not in query',
        'Extra field "age" found in fixture data not in query',
    ]

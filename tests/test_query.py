from signed_uri.logic.query import parse_query, serialize_query


def test_parse_keeps_order():
    assert list(parse_query("test=this&and=that").items()) == [("test", "this"), ("and", "that")]


def test_parse_bare_key_is_none():
    assert parse_query("foo=bar&baz") == {"foo": "bar", "baz": None}


def test_parse_empty_value_is_not_none():
    assert parse_query("foo=") == {"foo": ""}


def test_parse_last_write_wins_in_first_position():
    params = parse_query("a=1&b=2&a=3")
    assert list(params.items()) == [("a", "3"), ("b", "2")]


def test_parse_splits_on_first_equals_only():
    assert parse_query("a=b=c") == {"a": "b=c"}


def test_parse_skips_empty_tokens_and_names():
    assert parse_query("&a=1&&=orphan&b=2&") == {"a": "1", "b": "2"}


def test_parse_decodes_form_encoding():
    assert parse_query("q=a+b%26c&path=%2Fx%2Fy") == {"q": "a b&c", "path": "/x/y"}


def test_serialize_round_trip_for_explicit_values():
    query = "test=this&and=that&x=1"
    assert serialize_query(parse_query(query)) == query


def test_serialize_bare_key_gains_equals():
    assert serialize_query(parse_query("foo=bar&baz")) == "foo=bar&baz="


def test_serialize_encodes_reserved_characters():
    assert serialize_query({"q": "a b&c", "next": "https://x.y/?z=1"}) == "q=a+b%26c&next=https%3A%2F%2Fx.y%2F%3Fz%3D1"


def test_serialize_scalars():
    assert serialize_query({"n": 1, "on": True, "off": False, "none": None}) == "n=1&on=1&off=0&none="

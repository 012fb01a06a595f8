import pytest

from messaging.sms import is_success_code, parse_response


def test_parse_response_reads_errno_and_errtext():
    resp = parse_response("errno=100&errtext=Accepted")
    assert resp.code == "100"
    assert resp.text == "Accepted"


def test_parse_response_decodes_form_encoding():
    resp = parse_response("errno=210&errtext=Invalid+number%21")
    assert resp.text == "Invalid number!"


def test_parse_response_missing_keys_are_none():
    resp = parse_response("foo=bar")
    assert resp.code is None
    assert resp.text is None


def test_parse_response_never_raises_on_garbage():
    for body in ["", None, "<html>502 Bad Gateway</html>", "&&==&"]:
        resp = parse_response(body)
        assert resp.code is None


def test_parse_response_keeps_blank_values():
    assert parse_response("errno=&errtext=").code == ""


def test_parse_response_last_value_wins():
    assert parse_response("errno=200&errno=100").code == "100"


@pytest.mark.parametrize("code", [100, "100", "0100", "100.0", "1e2", "+100", " 100", "100 "])
def test_success_codes(code):
    assert is_success_code(code)


@pytest.mark.parametrize("code", [None, 10, "1000", "10", "", " ", "100abc", "abc", "0x64", "1_00"])
def test_failure_codes(code):
    assert not is_success_code(code)


@pytest.mark.parametrize("code", ["\t100", "100\n", "\r\n100\v", "\f100 "])
def test_success_codes_allow_any_surrounding_whitespace(code):
    assert is_success_code(code)

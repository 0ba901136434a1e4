import pytest

from aatargs.options import (
    ArgOption,
    ArgsError,
    ExtArgsType,
    int_to_ipv4,
    ipv4_to_int,
    is_strict_double,
    is_strict_int,
    is_valid_ipv4,
)


@pytest.mark.parametrize(
    "text", ["123", "-12", "+7", "0000", "2147483647", "-2147483648", "00002147483647"]
)
def test_strict_int_accepts(text):
    assert is_strict_int(text) is True


@pytest.mark.parametrize(
    "text", ["", "+", "-", "12a", "1.5", "2147483648", "-2147483649", "99999999999", " 1"]
)
def test_strict_int_rejects(text):
    assert is_strict_int(text) is False


@pytest.mark.parametrize("text", ["2.34", "-3", "101.234", "+1.", ".5", "7"])
def test_strict_double_accepts(text):
    assert is_strict_double(text) is True


@pytest.mark.parametrize("text", ["", "-", "1.2.3", "abc", "1e5", "."])
def test_strict_double_rejects(text):
    assert is_strict_double(text) is False


@pytest.mark.parametrize("text", ["1.1.1.1", "192.168.80.230", "0.0.0.0", "255.255.255.255"])
def test_valid_ipv4(text):
    assert is_valid_ipv4(text) is True


@pytest.mark.parametrize("text", ["1.1.1.1234", "1.1.1", "1.1.1.1.", "a.b.c.d", "", "1..1.1"])
def test_invalid_ipv4(text):
    assert is_valid_ipv4(text) is False


def test_ipv4_conversion_known_value():
    assert ipv4_to_int("127.0.0.1") == 0x7F000001
    assert int_to_ipv4(0x7F000001) == "127.0.0.1"


@pytest.mark.parametrize("text", ["1.1.1.1", "192.168.80.230", "0.0.0.0", "255.255.255.255"])
def test_ipv4_round_trip(text):
    assert int_to_ipv4(ipv4_to_int(text)) == text


def test_ipv4_errors():
    with pytest.raises(ArgsError):
        ipv4_to_int("1.1.1.1234")
    with pytest.raises(ArgsError):
        int_to_ipv4(-1)


def test_boolean_option():
    opt = ArgOption.boolean("--bool", True)
    assert opt.kind is ExtArgsType.BOOLEAN
    assert opt.type_name() == "Bool"
    assert opt.default is True
    assert opt.existed is False
    assert opt.range_text() == "/"


def test_int_range_option():
    opt = ArgOption.int_range("--intdef", 12345, 0, 65535, False)
    assert opt.type_name() == "IntWithDefault"
    assert opt.value == 12345
    assert opt.range_text() == "[0..65535]"
    strict = ArgOption.int_range("--interr", 12345, 0, 65535, True)
    assert strict.type_name() == "IntWithError"


def test_int_set_option_default_index():
    opt = ArgOption.int_set("--intsetdef", [11, 22, 33, 123, 345], 2, False)
    assert opt.default == 33
    assert opt.value == 33
    assert opt.range_text() == "11/22/33/123/345"
    assert opt.type_name() == "IntSETWithDefault"


def test_set_option_out_of_range_index_uses_first():
    opt = ArgOption.int_set("--x", [11, 22], 9, True)
    assert opt.default == 11
    assert opt.type_name() == "IntSETWithError"


def test_set_option_requires_choices():
    with pytest.raises(ArgsError):
        ArgOption.string_set("--x", [], 0, False)


def test_double_range_texts():
    opt = ArgOption.double_range("--doubledef", 1.23, -2.5, 99.9, False)
    assert opt.type_name() == "DoubleWithDefault"
    assert opt.range_text() == "[-2.500000..99.900000]"
    assert opt.range_text_double() == "[-2.5..99.9]"


def test_double_set_texts():
    opt = ArgOption.double_set("--doublesetdef", [1.1, 2.2, 3.3, 12.3, 3.45], 2, False)
    assert opt.default == 3.3
    assert opt.range_text_double() == "1.1/2.2/3.3/12.3/3.45"
    parts = opt.range_text().split("/")
    assert [float(p) for p in parts] == [1.1, 2.2, 3.3, 12.3, 3.45]
    assert all(len(p.split(".")[1]) == 6 for p in parts)


def test_range_text_double_for_non_double():
    assert ArgOption.int_range("--i", 1, 0, 9).range_text_double() == "/"


def test_string_options():
    s = ArgOption.string("--str2", "Hello")
    assert s.value == "Hello"
    assert s.type_name() == "String"
    assert s.range_text() == "/"
    hashes = ["md5", "sha1", "sha224", "sha256", "sha384", "sha512", "all"]
    ss = ArgOption.string_set("--strsetdef", hashes, 3, False)
    assert ss.default == "sha256"
    assert ss.range_text() == "/".join(hashes)
    assert ArgOption.string_set("--strseterr", hashes, 3, True).type_name() == "StringSETWithError"


def test_ipaddr_options():
    opt = ArgOption.ipaddr("--ipdef", "192.168.80.230", False)
    assert opt.type_name() == "IPAddrWithDefault"
    assert opt.ip_value == ipv4_to_int("192.168.80.230")
    assert opt.str_ipaddr() == "192.168.80.230"
    empty = ArgOption.ipaddr("--iperr", "", True)
    assert empty.default == "0.0.0.0"
    assert empty.ip_value == 0
    assert empty.type_name() == "IPAddrWithError"


def test_ipaddr_invalid_default():
    with pytest.raises(ArgsError):
        ArgOption.ipaddr("--ip", "1.2.3", False)
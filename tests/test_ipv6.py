import ipaddress

import pytest

from algosolve.ipv6 import expand_ipv6, main

SAMPLES = [
    "25:09:1985:aa:091:4846:374:bb",
    "::1",
    "1::",
    "::",
    "fe80::1:2",
    "2001:db8::ff00:42:8329",
    "1:2:3:4:5:6::8",
]


def test_worked_example():
    assert expand_ipv6("25:09:1985:aa:091:4846:374:bb") == (
        "0025:0009:1985:00aa:0091:4846:0374:00bb"
    )


@pytest.mark.parametrize("address", SAMPLES)
def test_matches_standard_exploded_form(address):
    assert expand_ipv6(address) == ipaddress.IPv6Address(address).exploded


@pytest.mark.parametrize("address", SAMPLES)
def test_result_shape(address):
    result = expand_ipv6(address)
    assert len(result) == 39
    assert [len(group) for group in result.split(":")] == [4] * 8


@pytest.mark.parametrize("address", SAMPLES)
def test_expansion_is_idempotent(address):
    once = expand_ipv6(address)
    assert expand_ipv6(once) == once


@pytest.mark.parametrize(
    "address",
    ["1::2::3", "1:2:3", "12345::", "g::1", "1:2:3:4:5:6:7:8:9", ":1:2:3:4:5:6:7"],
)
def test_malformed_addresses_raise(address):
    with pytest.raises(ValueError):
        expand_ipv6(address)


def test_main_prints_expansion(tmp_path, capsys):
    source = tmp_path / "addr.txt"
    source.write_text("fe80::1:2\n")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out.strip() == ipaddress.IPv6Address("fe80::1:2").exploded
import pytest

import argmap
from argmap import parser

# --- Long Options ----------------------------------------------------------- #


def test_parse_long_with_equals():
    args, argv = argmap.parse(["--msg=cool"])
    assert args == []
    assert argv == {"msg": ["cool"]}


def test_parse_long_splits_on_first_equals():
    _, argv = argmap.parse(["--define=a=b"])
    assert argv == {"define": ["a=b"]}


def test_parse_long_with_empty_value():
    _, argv = argmap.parse(["--msg="])
    assert argv == {"msg": [""]}


def test_parse_long_with_following_value():
    args, argv = argmap.parse(["--msg", "cool"])
    assert args == []
    assert argv == {"msg": ["cool"]}


def test_parse_long_boolean():
    args, argv = argmap.parseWithConfig(["--msg", "cool"], {"msg"})
    assert args == ["cool"]
    assert argv == {"msg": []}


def test_parse_long_alone():
    args, argv = argmap.parse(["--one"])
    assert args == []
    assert argv == {"one": []}


def test_parse_long_before_option():
    _, argv = argmap.parse(["--one", "--two", "x"])
    assert argv == {"one": [], "two": ["x"]}


def test_parse_long_before_separator():
    args, argv = argmap.parse(["--q", "--"])
    assert args == []
    assert argv == {"q": []}


def test_parse_long_negative_number():
    _, argv = argmap.parse(["--n", "-555"])
    assert argv == {"n": ["-555"]}


def test_parse_long_takes_lone_dash():
    args, argv = argmap.parse(["--infile", "-"])
    assert args == []
    assert argv == {"infile": ["-"]}


# --- Short Options ---------------------------------------------------------- #


def test_parse_short_alone():
    args, argv = argmap.parse(["-z"])
    assert args == []
    assert argv == {"z": []}


def test_parse_short_with_following_value():
    _, argv = argmap.parse(["-x", "5"])
    assert argv == {"x": ["5"]}


def test_parse_short_with_equals():
    _, argv = argmap.parse(["-y=cool"])
    assert argv == {"y": ["cool"]}


def test_parse_short_cluster_with_equals_is_one_key():
    _, argv = argmap.parse(["-qrs=1234"])
    assert argv == {"qrs": ["1234"]}


def test_parse_short_attached_number():
    _, argv = argmap.parse(["-n3"])
    assert argv == {"n": ["3"]}


def test_parse_short_cluster():
    args, argv = argmap.parse(["-xvf", "file.tgz"])
    assert args == []
    assert argv == {"x": [], "v": [], "f": ["file.tgz"]}


def test_parse_short_cluster_attached_number():
    _, argv = argmap.parse(["-abcdef123456"])
    assert argv == {
        "a": [],
        "b": [],
        "c": [],
        "d": [],
        "e": [],
        "f": ["123456"],
    }


def test_parse_short_cluster_non_alpha_break():
    _, argv = argmap.parse(["-abc+5", "-c-6"])
    assert argv == {"a": [], "b": [], "c": ["+5", "-6"]}


def test_parse_short_cluster_boolean_last():
    args, argv = argmap.parseWithConfig(["-xq", "1234"], {"q"})
    assert args == ["1234"]
    assert argv == {"x": [], "q": []}


def test_parse_short_cluster_boolean_then_digits():
    args, argv = argmap.parseWithConfig(["-n5", "x"], {"n"})
    assert args == ["x"]
    assert argv == {"n": [], "5": []}


def test_parse_short_cluster_boolean_then_digits_mid_cluster():
    args, argv = argmap.parseWithConfig(["-ab55", "x"], {"b"})
    assert args == ["x"]
    assert argv == {"a": [], "b": [], "55": []}


def test_parse_short_cluster_boolean_then_mixed():
    _, argv = argmap.parseWithConfig(["-n5x", "y"], {"n"})
    assert argv == {"n": [], "5": [], "x": ["y"]}


def test_parse_short_boolean():
    args, argv = argmap.new().boolean("q").parse(["-x", "5", "-q", "1234", "--z=789"])
    assert args == ["1234"]
    assert argv == {"x": ["5"], "q": [], "z": ["789"]}


def test_parse_flag_keeps_values():
    _, argv = argmap.parse(["-x", "6", "-xvf", "a.tgz"])
    assert argv == {"x": ["6"], "v": [], "f": ["a.tgz"]}


# --- Numbers ---------------------------------------------------------------- #


def test_parse_negative_number_value():
    args, argv = argmap.parse(["-n", "-555"])
    assert args == []
    assert argv == {"n": ["-555"]}


def test_parse_negative_number_boolean():
    _, argv = argmap.parseWithConfig(["-n", "-555"], {"n"})
    assert argv == {"n": [], "555": []}


def test_parse_numeric_flag():
    args, argv = argmap.parse(["-7"])
    assert args == []
    assert argv == {"7": []}


def test_parse_numeric_flag_is_not_split():
    _, argv = argmap.parse(["-555"])
    assert argv == {"555": []}


def test_parse_numeric_flag_takes_no_value():
    args, argv = argmap.parse(["-5", "x"])
    assert args == ["x"]
    assert argv == {"5": []}


# --- Positionals ------------------------------------------------------------ #


def test_parse_empty():
    args, argv = argmap.parse([])
    assert args == []
    assert argv == {}


def test_parse_positional_only():
    toks = ["prog", "one", "two", "+3", "four=4"]
    args, argv = argmap.parse(toks)
    assert args == toks
    assert argv == {}


def test_parse_lone_dash_is_positional():
    args, argv = argmap.parse(["-", "x"])
    assert args == ["-", "x"]
    assert argv == {}


def test_parse_separator():
    args, argv = argmap.parse(["a", "--", "-z", "0"])
    assert args == ["a", "-z", "0"]
    assert argv == {}


def test_parse_separator_only_first():
    args, _ = argmap.parse(["--", "--", "--x=1"])
    assert args == ["--", "--x=1"]


def test_parse_repeated_keys():
    _, argv = argmap.parse(["-y=6", "-y8"])
    assert argv == {"y": ["6", "8"]}


def test_parse_stringifies_tokens():
    args, argv = argmap.parse([1, "-n", 2])
    assert args == ["1"]
    assert argv == {"n": ["2"]}


# --- Scenarios -------------------------------------------------------------- #


def test_parse_full_scenario():
    args, argv = argmap.parse(
        [
            "prog",
            "-z", "5",
            "-y=6",
            "-y8",
            "--msg", "cool",
            "-7",
            "--here=there",
            "-xvf", "file.tgz",
            "-qrs=1234",
            "-n", "-555",
            "one", "two", "three",
            "-abc+5",
            "-c-6",
            "--",
            "four", "-z", "0",
        ]
    )  # fmt: skip
    assert args == ["prog", "one", "two", "three", "four", "-z", "0"]
    assert argv == {
        "z": ["5"],
        "7": [],
        "y": ["6", "8"],
        "x": [],
        "v": [],
        "f": ["file.tgz"],
        "here": ["there"],
        "n": ["-555"],
        "qrs": ["1234"],
        "a": [],
        "b": [],
        "c": ["+5", "-6"],
        "msg": ["cool"],
    }


def test_parse_mixed_1():
    args, argv = argmap.parse(
        [
            "--long", "5",
            "-x", "6",
            "-n3",
            "hello",
            "-xvf", "whatever.tgz",
            "-y=cool",
            "-x7",
            "world",
            "--z=13",
            "-z", "12",
            "--",
            "hmm",
        ]
    )  # fmt: skip
    assert args == ["hello", "world", "hmm"]
    assert argv == {
        "long": ["5"],
        "x": ["6", "7"],
        "n": ["3"],
        "v": [],
        "f": ["whatever.tgz"],
        "y": ["cool"],
        "z": ["13", "12"],
    }


def test_parse_mixed_2():
    args, argv = argmap.parse(
        [
            "--hey=what",
            "-x", "5",
            "-x", "6",
            "hi",
            "-zn9",
            "-j", "3",
            "-i", "q",
            "-5",
            "--n", "-1312",
            "-xvf", "payload.tgz",
            "-j=zzz",
            "-",
            "whatever",
            "-w3",
            "--",
            "-cool",
            "--yes=xyz",
        ]
    )  # fmt: skip
    assert args == ["hi", "-", "whatever", "-cool", "--yes=xyz"]
    assert argv == {
        "hey": ["what"],
        "x": ["5", "6"],
        "z": [],
        "j": ["3", "zzz"],
        "i": ["q"],
        "5": [],
        "n": ["9", "-1312"],
        "v": [],
        "f": ["payload.tgz"],
        "w": ["3"],
    }


@pytest.mark.parametrize(
    "toks, count",
    [
        (["prog", "-a", "b", "--c", "d", "e"], 4),
        (["-xvf", "f", "g", "--", "-h"], 3),
        (["--k=v", "-n", "-1", "-", "x", "-y9"], 5),
        (["-ab5", "x", "--", "--", "-q"], 4),
    ],
)
def test_parse_loses_no_values(toks, count):
    args, argv = argmap.parse(toks)
    values = [v for vs in argv.values() for v in vs]
    assert len(args) + len(values) == count
    for tok in toks:
        if not tok.startswith("-") or tok == "-":
            assert tok in args or tok in values


# --- Config ----------------------------------------------------------------- #


def test_argmap_boolean_chains():
    cfg = argmap.new().boolean("h").boolean("help", "c")
    assert cfg.booleans == {"h", "help", "c"}


def test_argmap_is_not_mutated_by_parse():
    cfg = parser.ArgMap({"q"})
    cfg.parse(["-q", "x", "--z", "y"])
    assert cfg.booleans == {"q"}


def test_argmap_calls_are_independent():
    cfg = argmap.new()
    _, first = cfg.parse(["-a", "1"])
    _, second = cfg.parse(["-b", "2"])
    assert first == {"a": ["1"]}
    assert second == {"b": ["2"]}

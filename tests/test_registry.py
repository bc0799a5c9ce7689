import pytest

from typedargv import options
from typedargv.errors import DuplicateOptionError, UnknownOptionError
from typedargv.registry import Registry


def test_registry_lookup():
    count = options.arg(int, "count", "n")
    verbose = options.flag("verbose")
    reg = Registry([count, verbose])

    assert reg.resolveLong("count") is count
    assert reg.resolveShort("n") is count
    assert reg.resolveLong("verbose") is verbose
    assert reg.byShortAlias == {"n": count}


def test_registry_order():
    a = options.flag("a")
    b = options.arg(str, "b")
    c = options.flag("c")
    reg = Registry([c, a, b])

    assert reg.options() == [c, a, b]
    assert len(reg) == 3
    assert "a" in reg
    assert "d" not in reg


def test_registry_empty():
    reg = Registry([])
    assert len(reg) == 0
    assert reg.options() == []


def test_registry_duplicate_name():
    with pytest.raises(DuplicateOptionError) as e:
        Registry([options.arg(int, "count"), options.flag("count")])
    assert e.value.name == "count"


def test_registry_duplicate_alias():
    with pytest.raises(DuplicateOptionError) as e:
        Registry([options.arg(int, "count", "c"), options.flag("color", "c")])
    assert "-c" in str(e.value)
    assert "count" in str(e.value)


def test_registry_unknown_long():
    reg = Registry([options.flag("verbose")])
    with pytest.raises(UnknownOptionError) as e:
        reg.resolveLong("bogus")
    assert e.value.name == "bogus"
    assert e.value.token == "--bogus"


def test_registry_unknown_short():
    reg = Registry([options.flag("verbose")])
    with pytest.raises(UnknownOptionError) as e:
        reg.resolveShort("v")
    assert e.value.name == "v"
    assert e.value.token == "-v"

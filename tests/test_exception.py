import pytest

from parallel.exception import DefaultException, ExceptionProxy, default_exception


def test_default_dealer_prints_error(capsys):
    dealer = DefaultException().deal(1, 2, 3)
    dealer(ValueError("boom"))
    assert capsys.readouterr().out == "boom\n"


def test_default_exception_factory_prints(capsys):
    proxy = default_exception()
    assert isinstance(proxy, DefaultException)
    proxy.deal()("oops")
    assert capsys.readouterr().out == "oops\n"


def test_custom_proxy_wrapping_default(capsys):
    seen = []
    base = default_exception()

    class Tagged(ExceptionProxy):
        def deal(self, *args):
            inner = base.deal(*args)

            def dealer(err):
                seen.append(args)
                inner(err)

            return dealer

    proxy = Tagged()
    assert isinstance(proxy, ExceptionProxy)
    proxy.deal("a", "b")("err")
    assert seen == [("a", "b")]
    assert capsys.readouterr().out == "err\n"


def test_default_dealer_ignores_args(capsys):
    DefaultException().deal("x", 42)(KeyError("k"))
    assert capsys.readouterr().out == "'k'\n"


def test_proxy_is_abstract():
    with pytest.raises(TypeError):
        ExceptionProxy()
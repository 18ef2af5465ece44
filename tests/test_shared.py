# tests/test_shared.py
import pytest

from shared import debug_trace
from shared.debug_trace import debug_wrap, debug_wrap_ctx
from shared.ids import new_id, resolve_user, sanitize, sanitize_plus


# ------------------ ids ------------------

def test_new_id_unique_with_prefix():
    a, b = new_id("pay"), new_id("pay")
    assert a.startswith("pay_") and len(a) == 16
    assert a != b


def test_sanitize():
    assert sanitize("  Dinner\x07 ") == "Dinner"
    assert sanitize(None) == ""
    assert sanitize_plus("  two   words ", upper=True) == "TWO WORDS"


def test_resolve_user(monkeypatch):
    monkeypatch.delenv("KITEDASH_USER", raising=False)
    assert resolve_user() == "system"
    assert resolve_user({"email": "ana@kite.example"}) == "ana@kite.example"

    monkeypatch.setenv("KITEDASH_USER", "Lucas")
    assert resolve_user() == "Lucas"
    assert resolve_user(" Ana ") == "Ana"


# ------------------ debug_trace ------------------

class _FakeSt:
    def __init__(self):
        self.calls = []

    def error(self, msg):
        self.calls.append(("error", msg))

    def code(self, body):
        self.calls.append(("code", body))


@pytest.fixture
def fake_st(monkeypatch):
    fake = _FakeSt()
    monkeypatch.setattr(debug_trace, "st", fake)
    return fake


def test_debug_wrap_reports_and_reraises(fake_st):
    @debug_wrap("Could not save")
    def boom():
        raise RuntimeError("disk on fire")

    with pytest.raises(RuntimeError):
        boom()
    assert fake_st.calls[0] == ("error", "Could not save")
    assert "disk on fire" in fake_st.calls[1][1]


def test_value_error_is_not_reported(fake_st):
    @debug_wrap()
    def invalid():
        raise ValueError("Amount must be greater than zero.")

    with pytest.raises(ValueError):
        invalid()
    with pytest.raises(ValueError):
        with debug_wrap_ctx():
            raise ValueError("bad")
    assert fake_st.calls == []


def test_debug_wrap_passes_result_through(fake_st):
    @debug_wrap()
    def ok(x):
        return x * 2

    assert ok(21) == 42
    with debug_wrap_ctx("never shown"):
        pass
    assert fake_st.calls == []


def test_debug_wrap_ctx_reports(fake_st):
    with pytest.raises(KeyError):
        with debug_wrap_ctx("Report failed"):
            raise KeyError("x")
    assert fake_st.calls[0] == ("error", "Report failed")

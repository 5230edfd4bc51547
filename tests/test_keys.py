import pytest

from meowengine.keys import Key, ScriptedKeys


def test_poll_in_order():
    keys = ScriptedKeys([Key.UP, None, Key.SECOND])
    assert [keys.poll(), keys.poll(), keys.poll()] == [Key.UP, None, Key.SECOND]


def test_exhausted_flag():
    keys = ScriptedKeys([Key.ESC])
    assert keys.exhausted() is False
    keys.poll()
    assert keys.exhausted() is True


def test_poll_after_end_raises():
    keys = ScriptedKeys([])
    assert keys.exhausted() is True
    with pytest.raises(EOFError):
        keys.poll()


def test_rejects_non_keys():
    with pytest.raises(TypeError):
        ScriptedKeys([Key.LEFT, "left"])


def test_accepts_generator():
    keys = ScriptedKeys(k for k in (Key.LEFT, Key.RIGHT))
    assert keys.poll() is Key.LEFT
    assert keys.poll() is Key.RIGHT
    assert keys.exhausted()
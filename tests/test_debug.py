import pytest

from minios.debug import DBG_ALL, DBG_DISK, DBG_FILE, DBG_THREAD, Debug


def test_listed_flag_is_enabled():
    debug = Debug("ft")
    assert debug.is_enabled(DBG_FILE) is True
    assert debug.is_enabled(DBG_THREAD) is True


def test_unlisted_flag_is_disabled():
    assert Debug("f").is_enabled(DBG_DISK) is False


def test_plus_enables_everything():
    debug = Debug(DBG_ALL)
    assert all(debug.is_enabled(flag) for flag in "tsimdfanuc")


@pytest.mark.parametrize("flags", [None, ""])
def test_no_flags_disables_everything(flags):
    debug = Debug(flags)
    assert debug.is_enabled(DBG_FILE) is False
    assert debug.is_enabled(DBG_ALL) is False


def test_log_prints_enabled_message(capsys):
    assert Debug("f").log(DBG_FILE, "Creating file a size 10") is True
    assert capsys.readouterr().err == "Creating file a size 10\n"


def test_log_skips_disabled_message(capsys):
    assert Debug("d").log(DBG_FILE, "hidden") is False
    assert capsys.readouterr().err == ""
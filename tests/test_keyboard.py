from grayhist.keyboard import KeyRepeatFilter


def test_first_press_passes():
    keys = KeyRepeatFilter()
    assert keys.press("4", 100)


def test_x11_autorepeat_pairs_are_filtered():
    keys = KeyRepeatFilter()
    assert keys.press("4", 100)
    # autorepeat: Release i Press z tym samym czasem
    for t in (600, 633, 666):
        keys.release("4", t)
        assert not keys.press("4", t)
    keys.release("4", 700)
    assert keys.press("4", 900)


def test_press_only_autorepeat_is_filtered():
    keys = KeyRepeatFilter()
    assert keys.press("2", 10)
    assert not keys.press("2", 500)
    assert not keys.press("2", 530)


def test_separate_presses_pass():
    keys = KeyRepeatFilter()
    assert keys.press("1", 10)
    keys.release("1", 80)
    assert keys.press("1", 200)
    keys.release("1", 260)
    assert keys.press("1", 400)


def test_keys_are_independent():
    keys = KeyRepeatFilter()
    assert keys.press("1", 10)
    assert keys.press("2", 20)
    assert not keys.press("1", 30)


def test_release_of_unknown_key_is_ignored():
    keys = KeyRepeatFilter()
    keys.release("5", 10)
    assert keys.press("5", 10)

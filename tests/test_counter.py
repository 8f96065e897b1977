from askit.counter import INT32_MAX, Counter


def test_fresh_counter_is_idle():
    c = Counter()
    assert (c.down(), c.up(), c.count()) == (False, False, 0)


def test_press_edge_only_on_first_frame():
    c = Counter()
    c.update(True)
    assert c.down() is True
    c.update(True)
    assert c.down() is False
    assert c.count() == 2


def test_release_edge():
    c = Counter()
    c.update(True)
    c.update(False)
    assert c.up() is True
    assert c.count() == 0
    c.update(False)
    assert c.up() is False


def test_integer_input():
    c = Counter()
    c.update(5)
    c.update(0)
    assert c.up() is True


def test_take_methods_clear():
    c = Counter()
    c.update(True)
    assert c.take_down() is True
    assert c.down() is False
    assert c.take_count() == 1
    assert c.count() == 0


def test_take_up_clears():
    c = Counter()
    c.update(True)
    c.update(False)
    assert c.take_up() is True
    assert c.up() is False


def test_count_saturates():
    c = Counter()
    c._count = INT32_MAX
    c.update(True)
    assert c.count() == INT32_MAX
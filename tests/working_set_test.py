from set_oplog.working_set import NOT_A_NUMBER, NotANumber, WorkingSet, sort_members


def test_add_is_idempotent():
    working_set = WorkingSet()
    working_set.add(5)
    working_set.add(5)

    assert len(working_set) == 1
    assert 5 in working_set


def test_remove_absent_value_is_noop():
    working_set = WorkingSet()
    working_set.add(1)
    working_set.remove(7)

    assert working_set.sorted_members() == (1,)


def test_flush_does_not_clear():
    working_set = WorkingSet()
    working_set.add(3)
    working_set.flush()

    assert working_set.sorted_members() == (3,)


def test_members_sort_numerically():
    working_set = WorkingSet()
    for value in (10, 2, -4, 1):
        working_set.add(value)

    assert working_set.sorted_members() == (-4, 1, 2, 10)


def test_not_a_number_is_single_and_sorts_first():
    assert NotANumber() == NOT_A_NUMBER
    assert repr(NOT_A_NUMBER) == "NaN"

    working_set = WorkingSet()
    working_set.add(-100)
    working_set.add(NOT_A_NUMBER)
    working_set.add(NotANumber())

    assert len(working_set) == 2
    assert sort_members([3, NOT_A_NUMBER, -100]) == (NOT_A_NUMBER, -100, 3)

    working_set.remove(NOT_A_NUMBER)
    assert working_set.sorted_members() == (-100,)

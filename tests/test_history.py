import datetime

import pytest

import fourcolor


def snapshot(n):
    'Return a distinguishable snapshot number n.'
    coloring = fourcolor.ColorAssignment({'node': n})
    return fourcolor.HistorySnapshot(coloring, 'step %d' % n)


def actions(history):
    return [s.action for s in history]


@pytest.fixture()
def history():
    return fourcolor.HistoryManager(capacity=20)


def test_capacity_is_enforced(history):
    for n in range(25):
        history.push(snapshot(n))
    assert len(history) == 20
    assert history.cursor == 19
    assert actions(history) == ['step %d' % n for n in range(5, 25)]


def test_undo_returns_previous_snapshot(history):
    for n in range(4):
        history.push(snapshot(n))
    prev = history.undo()
    assert prev.action == 'step 2'
    assert prev.coloring.assignments == {'node': 2}
    assert history.cursor == 2


def test_redo_returns_undone_snapshot(history):
    for n in range(3):
        history.push(snapshot(n))
    history.undo()
    assert history.redo().action == 'step 2'
    assert history.redo() is None


def test_push_after_undo_discards_redo_branch(history):
    for n in range(4):
        history.push(snapshot(n))
    history.undo()
    history.undo()
    history.push(snapshot(9))
    assert actions(history) == ['step 0', 'step 1', 'step 9']
    assert not history.can_redo()
    assert history.redo() is None
    assert history.undo().action == 'step 1'


def test_undo_stops_at_first_snapshot(history):
    assert history.undo() is None
    history.push(snapshot(0))
    assert history.undo() is None
    assert history.cursor == 0
    history.push(snapshot(1))
    assert history.undo().action == 'step 0'
    assert history.undo() is None
    assert not history.can_undo()
    assert history.can_redo()


def test_redo_on_empty_history(history):
    assert history.redo() is None
    assert history.current() is None
    assert history.cursor == -1


def test_snapshots_are_copies(history):
    coloring = fourcolor.ColorAssignment({'a': 0})
    snap = fourcolor.HistorySnapshot(coloring, 'first')
    coloring.assignments['a'] = 3
    history.push(snap)
    snap.coloring.assignments['a'] = 2
    history.push(snapshot(1))

    restored = history.undo()
    assert restored.coloring.assignments == {'a': 0}
    restored.coloring.assignments['a'] = 1
    assert history.current().coloring.assignments == {'a': 0}


def test_timestamp_is_recorded():
    before = datetime.datetime.now()
    snap = snapshot(0)
    assert before <= snap.timestamp <= datetime.datetime.now()


def test_small_capacity():
    history = fourcolor.HistoryManager(capacity=1)
    history.push(snapshot(0))
    history.push(snapshot(1))
    assert len(history) == 1
    assert history.undo() is None
    assert history.current().action == 'step 1'


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        fourcolor.HistoryManager(capacity=0)


def test_clear(history):
    history.push(snapshot(0))
    history.clear()
    assert len(history) == 0
    assert history.undo() is None
    assert history.redo() is None


if __name__ == "__main__":
    pytest.main(["-v", __file__])

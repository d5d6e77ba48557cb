from fall_sim.events import Event


def test_emit_calls_subscribers_in_order():
    calls = []
    event = Event('changed')
    event.subscribe(lambda v: calls.append(('a', v)))
    event.subscribe(lambda v: calls.append(('b', v)))
    event.emit(3)
    assert calls == [('a', 3), ('b', 3)]


def test_subscribe_does_not_replay():
    calls = []
    event = Event('changed')
    event.emit(1)
    event.subscribe(calls.append)
    assert calls == []
    event.emit(2)
    assert calls == [2]


def test_unsubscribe():
    calls = []
    event = Event('changed')
    unsubscribe = event.subscribe(calls.append)
    assert len(event) == 1
    unsubscribe()
    event.emit(5)
    assert calls == []
    assert len(event) == 0
    # Removing twice is harmless
    unsubscribe()


def test_callback_may_unsubscribe_itself():
    calls = []
    event = Event('once')

    def once(value):
        calls.append(value)
        event.unsubscribe(once)

    event.subscribe(once)
    event.emit(1)
    event.emit(2)
    assert calls == [1]

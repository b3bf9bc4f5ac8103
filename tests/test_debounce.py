import asyncio
import logging

from debounce import Debouncer


async def test_bursts_collapse_into_one_call_with_last_value():
    loop = asyncio.get_running_loop()
    start = loop.time()
    calls = []

    async def record(value):
        calls.append((value, loop.time() - start))

    debouncer = Debouncer(0.5, record)
    debouncer.trigger("i")
    await asyncio.sleep(0.1)
    debouncer.trigger("inc")
    await asyncio.sleep(0.1)
    debouncer.trigger("incep")

    await asyncio.sleep(0.3)
    assert calls == []
    assert debouncer.pending

    await asyncio.sleep(0.4)
    assert len(calls) == 1
    value, fired_at = calls[0]
    assert value == "incep"
    assert fired_at >= 0.69
    assert not debouncer.pending


async def test_cancel_drops_pending_call():
    calls = []

    async def record(value):
        calls.append(value)

    debouncer = Debouncer(0.02, record)
    debouncer.trigger("x")
    debouncer.cancel()
    await asyncio.sleep(0.05)

    assert calls == []
    assert not debouncer.pending


async def test_cancel_leaves_started_callback_running():
    started = asyncio.Event()
    finished = []

    async def slow(value):
        started.set()
        await asyncio.sleep(0.05)
        finished.append(value)

    debouncer = Debouncer(0.01, slow)
    debouncer.trigger("x")
    await started.wait()
    debouncer.cancel()
    await asyncio.sleep(0.1)

    assert finished == ["x"]


async def test_callback_failure_is_logged(caplog):
    async def boom(value):
        raise RuntimeError("nope")

    debouncer = Debouncer(0.01, boom)
    with caplog.at_level(logging.ERROR, logger="debounce"):
        debouncer.trigger("x")
        await asyncio.sleep(0.05)

    assert "Debounced callback failed" in caplog.text


async def test_cancel_all_stops_started_callback_quietly(caplog):
    started = asyncio.Event()
    finished = []

    async def slow(value):
        started.set()
        await asyncio.sleep(0.05)
        finished.append(value)

    debouncer = Debouncer(0.01, slow)
    with caplog.at_level(logging.ERROR, logger="debounce"):
        debouncer.trigger("x")
        await started.wait()
        debouncer.cancel_all()
        await asyncio.sleep(0.1)

    assert finished == []
    assert not debouncer.pending
    assert "Debounced callback failed" not in caplog.text

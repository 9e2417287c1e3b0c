"""Tests for the refresh scheduler.

The timer sleep is replaced with fakes so tick counts are deterministic.
"""

import asyncio

import pytest

from feetracker.errors import UnsupportedAssetError
from feetracker.models.types import Asset
from feetracker.scheduler import RefreshScheduler, SchedulerState
from feetracker.state import AggregateState, StateStore
from tests.helpers import (
    FakeFeeFetcher,
    FakePriceFetcher,
    make_prices,
    park_forever,
    recording_sleep,
    run,
)


def make_scheduler(fees=None, prices=None, sleep=park_forever, interval=30.0):
    fees = fees or FakeFeeFetcher()
    prices = prices or FakePriceFetcher(make_prices(ethereum=2000, bitcoin=60_000, solana=150))
    store = StateStore(AggregateState.initial())
    scheduler = RefreshScheduler(fees, prices, store, interval=interval, sleep=sleep)
    return scheduler, store, fees, prices


class TestPeriodicRefresh:
    """Tests for the recurring timer."""

    def test_one_cycle_at_start_and_one_per_interval(self):
        """t=0 issues one cycle; each 30s tick issues exactly one more."""

        async def scenario():
            holder = {}

            async def finish_outstanding():
                await holder["scheduler"].join()

            sleep, sleeps, parked = recording_sleep(ticks=3, before_tick=finish_outstanding)
            scheduler, _, fees, prices = make_scheduler(sleep=sleep)
            holder["scheduler"] = scheduler

            handle = scheduler.start(Asset.ETHEREUM)
            await parked.wait()
            counts = (scheduler.cycles_issued, len(fees.calls), prices.calls)
            handle.cancel()
            await scheduler.join()
            return sleeps, counts

        sleeps, counts = run(scenario())

        # start + 3 ticks; the 4th sleep parks
        assert sleeps == [30.0, 30.0, 30.0, 30.0]
        assert counts == (4, 4, 4)

    def test_first_cycle_is_issued_synchronously(self):
        """start() moves to Fetching before yielding to the loop."""

        async def scenario():
            scheduler, _, _, _ = make_scheduler()
            scheduler.start(Asset.ETHEREUM)
            during = (scheduler.state, scheduler.cycles_issued)
            await scheduler.join()
            after = scheduler.state
            scheduler.stop()
            return during, after

        during, after = run(scenario())

        assert during == (SchedulerState.FETCHING, 1)
        assert after is SchedulerState.IDLE

    def test_tick_is_skipped_while_cycle_outstanding(self):
        """Ticks do not overlap an outstanding cycle."""

        async def scenario():
            gate = asyncio.Event()
            sleep, _, parked = recording_sleep(ticks=2)
            scheduler, _, fees, _ = make_scheduler(
                fees=FakeFeeFetcher(gates={Asset.ETHEREUM: gate}), sleep=sleep
            )

            handle = scheduler.start(Asset.ETHEREUM)
            await parked.wait()
            during = (scheduler.cycles_issued, scheduler.state)
            gate.set()
            await scheduler.join()
            handle.cancel()
            return during, scheduler.state, len(fees.calls)

        during, after, fee_calls = run(scenario())

        assert during == (1, SchedulerState.FETCHING)
        assert after is SchedulerState.IDLE
        assert fee_calls == 1


class TestAssetSwitch:
    """Tests for selecting a different asset."""

    def test_superseded_cycle_is_discarded(self):
        """A slow cycle for the old asset cannot overwrite the new asset's state."""

        async def scenario():
            gate = asyncio.Event()
            scheduler, store, fees, _ = make_scheduler(
                fees=FakeFeeFetcher(gates={Asset.ETHEREUM: gate})
            )

            scheduler.start(Asset.ETHEREUM)
            await asyncio.sleep(0)
            scheduler.select_asset(Asset.BITCOIN)
            await scheduler.refresh_now()
            mid = store.state.selected_asset

            gate.set()
            await scheduler.join()
            scheduler.stop()
            return mid, store.state, fees.calls

        mid, final, calls = run(scenario())

        assert mid is Asset.BITCOIN
        assert final.selected_asset is Asset.BITCOIN
        assert final.schedule.unit == "sat/vB"
        assert calls == [Asset.ETHEREUM, Asset.BITCOIN]

    def test_switch_cancels_previous_timer(self):
        """The previous asset's handle is cancelled on switch."""

        async def scenario():
            scheduler, _, _, _ = make_scheduler()
            first = scheduler.start(Asset.ETHEREUM)
            second = scheduler.select_asset("solana")
            await scheduler.join()
            scheduler.stop()
            return first, second

        first, second = run(scenario())

        assert first.cancelled
        assert second.cancelled  # stopped at the end
        assert second.generation == first.generation + 1
        assert second.asset is Asset.SOLANA

    def test_completed_cycle_then_switch(self):
        """Cycles for each selection apply in order when none overlap."""

        async def scenario():
            scheduler, store, _, _ = make_scheduler()
            scheduler.start(Asset.ETHEREUM)
            await scheduler.join()
            first = store.state
            scheduler.select_asset(Asset.SOLANA)
            await scheduler.join()
            scheduler.stop()
            return first, store.state

        first, second = run(scenario())

        assert first.selected_asset is Asset.ETHEREUM
        assert first.is_live is True
        assert second.selected_asset is Asset.SOLANA

    def test_unsupported_asset_raises(self):
        """Unknown assets propagate and leave the scheduler untouched."""

        async def scenario():
            scheduler, _, _, _ = make_scheduler()
            with pytest.raises(UnsupportedAssetError):
                scheduler.start("dogecoin")
            return scheduler

        scheduler = run(scenario())

        assert scheduler.cycles_issued == 0
        assert scheduler.asset is None


class TestCancellation:
    """Tests for stop() and RefreshHandle."""

    def test_stop_discards_outstanding_cycle(self):
        """After stop, an in-flight cycle completes but is not applied."""

        async def scenario():
            gate = asyncio.Event()
            scheduler, store, _, _ = make_scheduler(
                fees=FakeFeeFetcher(gates={Asset.ETHEREUM: gate})
            )
            before = store.state
            scheduler.start(Asset.ETHEREUM)
            await asyncio.sleep(0)
            scheduler.stop()
            gate.set()
            await scheduler.join()
            return before, store.state, scheduler

        before, after, scheduler = run(scenario())

        assert after is before
        assert not scheduler.running

    def test_no_ticks_after_stop(self):
        """A stopped scheduler issues no further cycles."""

        async def scenario():
            sleep, _, _ = recording_sleep(ticks=100)
            scheduler, _, _, _ = make_scheduler(sleep=sleep)
            scheduler.start(Asset.ETHEREUM)
            for _ in range(5):
                await asyncio.sleep(0)
            scheduler.stop()
            issued = scheduler.cycles_issued
            for _ in range(20):
                await asyncio.sleep(0)
            return issued, scheduler.cycles_issued

        issued, later = run(scenario())

        assert later == issued

    def test_cancel_is_idempotent(self):
        """Cancelling a handle twice is harmless."""

        async def scenario():
            scheduler, _, _, _ = make_scheduler()
            handle = scheduler.start(Asset.ETHEREUM)
            handle.cancel()
            handle.cancel()
            scheduler.stop()
            scheduler.stop()
            await scheduler.join()
            return handle

        handle = run(scenario())

        assert handle.cancelled

    def test_refresh_now_before_start_raises(self):
        scheduler, _, _, _ = make_scheduler()

        with pytest.raises(RuntimeError):
            run(scheduler.refresh_now())

    def test_refresh_now_after_stop_issues_nothing(self):
        """A stopped scheduler ignores manual refreshes."""

        async def scenario():
            scheduler, store, fees, _ = make_scheduler()
            scheduler.start(Asset.ETHEREUM)
            await scheduler.join()
            scheduler.stop()
            before = (scheduler.cycles_issued, len(fees.calls), store.state)
            result = await scheduler.refresh_now()
            after = (scheduler.cycles_issued, len(fees.calls), store.state)
            return result, before, after

        result, before, after = run(scenario())

        assert result is None
        assert after == before


class ExplodingFeeFetcher(FakeFeeFetcher):
    """Fee fetcher whose calls fail with an unexpected error."""

    async def fetch_result(self, asset):
        self.calls.append(asset)
        raise RuntimeError("fee source bug")


class TestFailedCycles:
    """Tests for cycles that raise."""

    def test_join_does_not_raise_for_failed_cycle(self):
        """A failing cycle leaves the state as it was and does not break join()."""

        async def scenario():
            scheduler, store, _, _ = make_scheduler(fees=ExplodingFeeFetcher())
            before = store.state
            scheduler.start(Asset.ETHEREUM)
            await scheduler.join()
            idle = scheduler.state
            scheduler.stop()
            return before, store.state, idle

        before, after, idle = run(scenario())

        assert after is before
        assert idle is SchedulerState.IDLE

    def test_next_tick_runs_after_failed_cycle(self):
        """The timer keeps issuing cycles after one has failed."""

        async def scenario():
            holder = {}

            async def finish_outstanding():
                await holder["scheduler"].join()

            sleep, _, parked = recording_sleep(ticks=2, before_tick=finish_outstanding)
            fees = ExplodingFeeFetcher()
            scheduler, _, _, _ = make_scheduler(fees=fees, sleep=sleep)
            holder["scheduler"] = scheduler
            scheduler.start(Asset.ETHEREUM)
            await parked.wait()
            scheduler.stop()
            await scheduler.join()
            return scheduler.cycles_issued, len(fees.calls)

        issued, fee_calls = run(scenario())

        # start + 2 ticks
        assert (issued, fee_calls) == (3, 3)


class TestLiveness:
    """Tests for the live flag across cycles."""

    def test_price_outage_reverts_to_demo(self):
        """A failing price source keeps prior prices and clears is_live."""

        async def scenario():
            prices = FakePriceFetcher(make_prices(ethereum=2000))
            scheduler, store, _, _ = make_scheduler(prices=prices)
            scheduler.start(Asset.ETHEREUM)
            await scheduler.join()
            live = store.state
            prices.snapshot = None
            await scheduler.refresh_now()
            scheduler.stop()
            return live, store.state

        live, demo = run(scenario())

        assert live.is_live is True
        assert demo.is_live is False
        assert demo.prices == live.prices

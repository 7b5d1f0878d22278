"""
Spin Controller
Rotation engine for the fortune wheel: jumps, tweens, multi-turn spins that
land on a chosen slice, and a continuous spin that can be redirected.

Integrates RotationState, ActiveAnimation tweens, CollisionDetector and a
Clock/Ticker pair. All state changes happen on the event loop thread.
"""

import asyncio
import logging
import operator

from .. import wheel_math
from ..configuration import SpinSettings, WheelConfiguration, WheelGeometry
from ..layout import slice_index_at_point
from ..lib import event_log
from .animation import ActiveAnimation, linear, resolve_curve
from .collision import CollisionDetector
from .rotation_state import RotationState
from .ticker import AsyncioTicker, MonotonicClock

logger = logging.getLogger(__name__)


class SliceIndexError(ValueError, IndexError):
    """Slice index outside [0, slice_count)."""


class WheelBusyError(RuntimeError):
    """Reconfiguration attempted while an animation is running."""


class SpinController:
    """
    Owns the wheel rotation and drives it over time.

    States: idle, animating (finite tween) and continuous spinning.
    Spin-start requests made while already spinning are dropped, not queued.
    """

    def __init__(self, slices, configuration=None, settings=None, *,
                 clock=None, ticker=None, surface=None, initial_rotation=0.0,
                 on_edge_collision=None, on_center_collision=None, on_slice_tap=None,
                 edge_collision_detection=None, center_collision_detection=None,
                 record_events=False):
        """
        Args:
            slices: sequence of Slice (at least one)
            configuration: WheelConfiguration (start position etc.)
            settings: SpinSettings (durations, curves, defaults)
            clock: object with now() in seconds; defaults to the ticker's clock
                or a monotonic clock
            ticker: object with start(callback)/stop(); defaults to AsyncioTicker
            surface: optional Surface receiving (slices, rotation) each tick
            initial_rotation: starting rotation in radians
            on_edge_collision / on_center_collision: callback(progress or None)
            on_slice_tap: callback(index) for handle_tap()
            edge_collision_detection / center_collision_detection: enable
                flags; default from settings
            record_events: also write lifecycle events to the spin event log
        """
        self.configuration = configuration or WheelConfiguration()
        self.settings = settings or SpinSettings()
        self._slices = ()
        self._geometry = None
        self._set_slices(slices)

        self.ticker = ticker or AsyncioTicker(self.settings.tick_interval_ms)
        self.clock = clock or getattr(self.ticker, "clock", None) or MonotonicClock()
        self.surface = surface
        self.on_slice_tap = on_slice_tap
        self.record_events = record_events

        if edge_collision_detection is None:
            edge_collision_detection = self.settings.edge_collision_detection
        if center_collision_detection is None:
            center_collision_detection = self.settings.center_collision_detection
        self._collisions = CollisionDetector(
            on_edge=on_edge_collision,
            on_center=on_center_collision,
            edge_enabled=edge_collision_detection,
            center_enabled=center_collision_detection,
        )

        self._spin_curve = resolve_curve(self.settings.animation_curve)
        self._rotate_curve = resolve_curve(self.settings.rotate_curve)

        self._state = RotationState(current_rotation=initial_rotation)
        self._waiters = []

    # ─────────────────────────────────────────────────────────────────────
    # Read-only view
    # ─────────────────────────────────────────────────────────────────────

    @property
    def slices(self):
        return self._slices

    @property
    def slice_count(self):
        return self._geometry.slice_count

    @property
    def geometry(self):
        return self._geometry

    @property
    def current_rotation(self):
        return self._state.current_rotation

    @property
    def current_index(self):
        """Slice currently under the pointer."""
        return wheel_math.index_at_rotation(
            self._state.current_rotation,
            self._geometry.slice_count,
            self._geometry.start_position,
        )

    @property
    def is_spinning(self):
        return self._state.is_spinning

    @property
    def is_animating(self):
        return self._state.is_animating

    def snapshot(self):
        """Copy of the RotationState."""
        return self._state.snapshot()

    # ─────────────────────────────────────────────────────────────────────
    # Rotation operations
    # ─────────────────────────────────────────────────────────────────────

    def rotate_to_index(self, index, duration=None):
        """
        Short tween that centers slice `index` under the pointer.

        Raises:
            SliceIndexError: index outside [0, slice_count)
            TypeError: index is not an integer
        """
        self._check_index(index)
        target_rotation = wheel_math.rotation_for_index(
            index, self._geometry.slice_count, self._geometry.start_position
        )
        self.rotate_to(target_rotation, duration=duration)

    def rotate_to(self, target_rotation, duration=None):
        """Tween to an absolute rotation (radians). No collision tracking."""
        if self._state.is_spinning:
            logger.debug("[SpinController] rotate_to ignored: wheel is spinning")
            return

        if duration is None:
            duration = self.settings.rotate_duration
        self._start_animation(target_rotation, duration, self._rotate_curve, spinning=False)

    async def spin_to_index(self, target_index, full_rotations=None, duration=None):
        """
        Spin several full turns and land on `target_index`.

        Resolves when the spin completes, or when stop() aborts it.
        A call made while the wheel is already spinning returns at once.

        Args:
            target_index: slice to land on
            full_rotations: whole turns before landing (default from settings)
            duration: seconds (default settings.animation_duration)
        Raises:
            SliceIndexError: target_index outside [0, slice_count)
            TypeError: target_index is not an integer
            Exception: whatever a surface or collision callback raised mid-spin;
                the wheel is stopped first
        """
        self._check_index(target_index)

        if self._state.is_spinning:
            logger.debug(f"[SpinController] spin_to_index({target_index}) ignored: already spinning")
            return

        if full_rotations is None:
            full_rotations = self.settings.full_rotations
        if duration is None:
            duration = self.settings.animation_duration

        target_rotation = wheel_math.rotation_for_index(
            target_index, self._geometry.slice_count, self._geometry.start_position
        )

        # Negative direction is "forward" for this wheel
        current = self._state.current_rotation
        full_rotation_radians = full_rotations * wheel_math.TWO_PI
        final_rotation = current - full_rotation_radians + (target_rotation - current)

        completion = asyncio.get_running_loop().create_future()
        self._start_animation(final_rotation, duration, self._spin_curve, spinning=True)
        self._waiters.append(completion)

        logger.info(
            f"[SpinController] Spin to index {target_index}: "
            f"{full_rotations} turns over {duration:.2f}s"
        )
        if self.record_events:
            event_log.log_spin_start(target_index, full_rotations, duration)

        await completion

    async def spin_to_backend_result(self, result_index, full_rotations=None, duration=None):
        """Land on an index supplied by a result provider. Same as spin_to_index."""
        return await self.spin_to_index(result_index, full_rotations=full_rotations, duration=duration)

    def start_continuous_rotation(self, rotations_per_second=None):
        """
        Spin indefinitely at a constant rate until stop_continuous_rotation() or stop().

        Raises:
            ValueError: non-positive rotations_per_second
        """
        if rotations_per_second is None:
            rotations_per_second = self.settings.continuous_rotations_per_second
        if rotations_per_second <= 0:
            raise ValueError(f"rotations_per_second must be positive, got {rotations_per_second}")

        if self._state.is_spinning:
            logger.debug("[SpinController] start_continuous_rotation ignored: already spinning")
            return

        # One full turn per period, repeated
        current = self._state.current_rotation
        self._start_animation(
            current - wheel_math.TWO_PI,
            1.0 / rotations_per_second,
            linear,
            spinning=True,
            repeat=True,
        )

        logger.info(f"[SpinController] Continuous rotation at {rotations_per_second}/s")
        if self.record_events:
            event_log.log_continuous_start(rotations_per_second)

    async def stop_continuous_rotation(self, land_on_index=None, deceleration_duration=None):
        """
        End a continuous spin. With land_on_index, decelerate onto that slice
        starting from the wheel's instantaneous angle; otherwise stop in place.

        No-op when no continuous spin is running.

        Raises:
            SliceIndexError: land_on_index outside [0, slice_count)
        """
        if land_on_index is not None:
            self._check_index(land_on_index)

        animation = self._state.active_animation
        if not self._state.is_spinning or animation is None or not animation.repeat:
            return

        # Freeze at the angle the wheel is at right now, not the last tick
        self._state.current_rotation = animation.value_at(animation.fraction_at(self.clock.now()))
        self.ticker.stop()

        if self.record_events:
            event_log.log_continuous_stop(land_on_index)

        if land_on_index is None:
            self._state.finish()
            self._settle_waiters()
            logger.info(f"[SpinController] Continuous rotation stopped at index {self.current_index}")
            return

        # Hand over to the landing spin; it must not be dropped as an overlap
        self._state.active_animation = None
        self._state.is_spinning = False

        if deceleration_duration is None:
            deceleration_duration = self.settings.deceleration_duration
        await self.spin_to_index(
            land_on_index,
            full_rotations=self.settings.landing_full_rotations,
            duration=deceleration_duration,
        )

    def stop(self):
        """Halt immediately. Rotation stays where the last tick left it."""
        self.ticker.stop()
        was_animating = self._state.is_animating
        self._state.finish()
        self._settle_waiters()

        if was_animating:
            logger.info(f"[SpinController] Stopped at rotation {self._state.current_rotation:.4f}")
            if self.record_events:
                event_log.log_stop(self._state.current_rotation)

    # ─────────────────────────────────────────────────────────────────────
    # Result provider flows
    # ─────────────────────────────────────────────────────────────────────

    async def spin_to_result(self, provider, full_rotations=None, duration=None):
        """
        Await `provider()` for the winning index, then spin to it.

        Returns:
            int: slice index under the pointer afterwards, or None if the
            wheel was already spinning
        """
        if self._state.is_spinning:
            return None

        result_index = await provider()
        # Another spin may have started while the provider was pending
        if self._state.is_spinning:
            logger.debug(f"[SpinController] spin_to_result({result_index}) dropped: wheel started spinning")
            return None
        await self.spin_to_backend_result(result_index, full_rotations=full_rotations, duration=duration)
        return self.current_index

    async def spin_while_fetching(self, provider, rotations_per_second=2.0, deceleration_duration=None):
        """
        Start spinning at once, await `provider()`, then land on its index.

        Any failure (provider error, bad index, cancellation) stops the wheel
        and propagates unchanged.

        Returns:
            int: slice index under the pointer afterwards, or None if the
            wheel was already spinning
        """
        if self._state.is_spinning:
            return None

        self.start_continuous_rotation(rotations_per_second)
        try:
            result_index = await provider()
            await self.stop_continuous_rotation(
                land_on_index=result_index,
                deceleration_duration=deceleration_duration,
            )
        except BaseException:
            self.stop()
            raise
        return self.current_index

    # ─────────────────────────────────────────────────────────────────────
    # Configuration & taps
    # ─────────────────────────────────────────────────────────────────────

    def reconfigure(self, slices=None, configuration=None):
        """
        Replace slices and/or configuration. The wheel must be idle.

        Raises:
            WheelBusyError: an animation is running
        """
        if self._state.is_animating:
            raise WheelBusyError("Stop the wheel before reconfiguring it")

        if configuration is not None:
            self.configuration = configuration
        self._set_slices(slices if slices is not None else self._slices)
        logger.info(f"[SpinController] Reconfigured: {self.slice_count} slices")

    def handle_tap(self, center, point):
        """
        Map a tap to a slice index and report it to on_slice_tap.

        Args:
            center: wheel center (x, y)
            point: tap position (x, y)
        Returns:
            int or None: tapped index; None while spinning
        """
        if self._state.is_spinning:
            return None

        index = slice_index_at_point(
            center, point,
            self._state.current_rotation,
            self._geometry.slice_count,
            self._geometry.start_position,
        )
        if self.on_slice_tap is not None:
            self.on_slice_tap(index)
        return index

    # ─────────────────────────────────────────────────────────────────────
    # Internal: tick loop
    # ─────────────────────────────────────────────────────────────────────

    def _on_tick(self):
        animation = self._state.active_animation
        if animation is None:
            self.ticker.stop()
            return

        t = animation.fraction_at(self.clock.now())
        self._state.current_rotation = animation.value_at(t)

        try:
            if self.surface is not None:
                self.surface.draw(self._slices, self._state.current_rotation)

            if self._state.is_spinning:
                progress = None if animation.repeat else t
                self._collisions.check(self._state, self._geometry, progress)
        except Exception as e:
            # Handed to whoever awaits the spin; re-raised when nobody does
            if not self._fail(e):
                raise
            return
        except BaseException:
            self.stop()
            raise

        # A callback may have stopped or replaced the animation
        if animation.is_complete(t) and self._state.active_animation is animation:
            self._complete()

    def _complete(self):
        was_spinning = self._state.is_spinning
        self._state.finish()
        self.ticker.stop()

        if was_spinning:
            logger.info(f"[SpinController] Landed on index {self.current_index}")
            if self.record_events:
                event_log.log_spin_complete(self.current_index, self._state.current_rotation)

        self._settle_waiters()

    def _fail(self, error):
        """Abort the animation after a tick callback raised. Returns True if a waiter took the error."""
        self.ticker.stop()
        self._state.finish()
        logger.error(f"[SpinController] Tick callback failed, wheel stopped: {error!r}")

        waiters, self._waiters = self._waiters, []
        delivered = False
        for waiter in waiters:
            if not waiter.done():
                waiter.set_exception(error)
                delivered = True
        return delivered

    def _start_animation(self, end_angle, duration, easing, spinning, repeat=False):
        animation = ActiveAnimation(
            start_angle=self._state.current_rotation,
            end_angle=end_angle,
            duration=duration,
            start_time=self.clock.now(),
            easing=easing,
            repeat=repeat,
        )
        # Ticker first: if it cannot start, the wheel state is untouched
        self.ticker.start(self._on_tick)
        # Whoever awaited the replaced animation is released, not left hanging
        self._settle_waiters()
        self._state.begin(animation, spinning)
        if spinning:
            self._state.clear_collisions()

    def _settle_waiters(self):
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(None)

    def _check_index(self, index):
        # Floats and bools would land off-center
        if isinstance(index, bool):
            raise TypeError(f"Slice index must be an integer, got {index!r}")
        index = operator.index(index)
        if not 0 <= index < self._geometry.slice_count:
            raise SliceIndexError(
                f"Index out of range: {index} (slice_count={self._geometry.slice_count})"
            )

    def _set_slices(self, slices):
        slices = tuple(slices)
        if not slices:
            raise ValueError("Must have at least one slice")
        self._geometry = WheelGeometry(len(slices), self.configuration.start_position)
        self._slices = slices

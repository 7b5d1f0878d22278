# Spin Engine
# Provides rotation state, tween animation, collision detection and the controller

from .animation import ActiveAnimation
from .collision import CollisionDetector
from .rotation_state import RotationState
from .spin_controller import SliceIndexError, SpinController, WheelBusyError
from .ticker import AsyncioTicker, ManualClock, ManualTicker, MonotonicClock

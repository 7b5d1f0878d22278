"""
Fortune Wheel

This package provides:
- wheel_math: angle/index geometry for a wheel of equal slices
- SpinController: rotation engine (tweens, spins, continuous spin, collisions)
- Slice / TextContent / ImageContent / LineContent: slice model
- WheelConfiguration / SpinSettings: appearance and timing configuration
- layout_wheel: layout geometry for a rendering surface
"""

__version__ = "0.3.0"

# Lazy imports to avoid loading all submodules
def __getattr__(name):
    if name in ('SpinController', 'SliceIndexError', 'WheelBusyError'):
        from .spin import spin_controller
        return getattr(spin_controller, name)
    if name in ('ManualClock', 'ManualTicker', 'AsyncioTicker', 'MonotonicClock'):
        from .spin import ticker
        return getattr(ticker, name)
    if name in ('Slice', 'TextContent', 'ImageContent', 'LineContent', 'TextMode', 'LineType'):
        from . import slices
        return getattr(slices, name)
    if name in ('WheelConfiguration', 'WheelStartPosition', 'WheelGeometry',
                'PinConfiguration', 'PinPosition', 'SpinSettings', 'SliceBackgroundColors'):
        from . import configuration
        return getattr(configuration, name)
    if name in ('layout_wheel', 'WheelLayout'):
        from . import layout
        return getattr(layout, name)
    if name in ('Surface', 'RecordingSurface'):
        from . import surface
        return getattr(surface, name)
    raise AttributeError(f"module 'fortune_wheel' has no attribute '{name}'")

__all__ = [
    'SpinController',
    'SliceIndexError',
    'WheelBusyError',
    'ManualClock',
    'ManualTicker',
    'AsyncioTicker',
    'MonotonicClock',
    'Slice',
    'TextContent',
    'ImageContent',
    'LineContent',
    'TextMode',
    'LineType',
    'WheelConfiguration',
    'WheelStartPosition',
    'WheelGeometry',
    'PinConfiguration',
    'PinPosition',
    'SpinSettings',
    'SliceBackgroundColors',
    'layout_wheel',
    'WheelLayout',
    'Surface',
    'RecordingSurface',
]

from .bus import Channel, EventBus

__all__ = ["Channel", "EventBus"]

from gallery.services.event_bus import EventBus, GalleryEvent


def test_publish_reaches_subscribers_in_order():
    bus = EventBus()
    seen = []
    bus.subscribe(GalleryEvent.MEMORY_RESET, lambda e: seen.append(("a", e.payload)))
    bus.subscribe("memory_reset", lambda e: seen.append(("b", e.payload)))
    evt = bus.publish(GalleryEvent.MEMORY_RESET, 3)
    assert evt.name == "memory_reset"
    assert seen == [("a", 3), ("b", 3)]


def test_once_subscription_removed_after_delivery():
    bus = EventBus()
    calls = []
    bus.subscribe(GalleryEvent.ZOOM_CHANGED, calls.append, once=True)
    bus.publish(GalleryEvent.ZOOM_CHANGED, 1.1)
    bus.publish(GalleryEvent.ZOOM_CHANGED, 1.2)
    assert [e.payload for e in calls] == [1.1]


def test_handler_errors_are_isolated():
    bus = EventBus()
    seen = []

    def boom(_event):
        raise RuntimeError("handler failed")

    bus.subscribe(GalleryEvent.WINDOWS_ORGANIZED, boom)
    bus.subscribe(GalleryEvent.WINDOWS_ORGANIZED, lambda e: seen.append(e.name))
    bus.publish(GalleryEvent.WINDOWS_ORGANIZED)
    assert seen == ["windows_organized"]
    assert len(bus.errors) == 1
    assert isinstance(bus.errors[0][1], RuntimeError)


def test_cancelled_subscription_is_skipped():
    bus = EventBus()
    seen = []
    sub = bus.subscribe(GalleryEvent.STATE_RESTORED, seen.append)
    sub.cancel()
    bus.publish(GalleryEvent.STATE_RESTORED)
    assert seen == []
    bus.unsubscribe(sub)
    bus.unsubscribe(sub)
    bus.publish(GalleryEvent.STATE_RESTORED)
    assert seen == []


def test_tracing_keeps_bounded_summaries():
    bus = EventBus()
    bus.enable_tracing(capacity=2)
    bus.publish(GalleryEvent.ABOUT_DISMISSED)
    bus.publish(GalleryEvent.ZOOM_CHANGED, "x" * 100)
    bus.publish(GalleryEvent.MEMORY_RESET)
    entries = bus.recent_trace_entries()
    assert [e.name for e in entries] == ["zoom_changed", "memory_reset"]
    assert entries[0].summary.endswith("...") and len(entries[0].summary) == 40
    assert entries[1].summary == "-"
